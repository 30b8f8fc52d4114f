# Built-in quiz definitions. Keys follow the JSON catalog format accepted by
# app.services.catalog.load_catalog_file, so this mapping can be exported as-is.

DEFAULT_QUIZZES = {
    "treasure": {
        "name": "Treasure Hunt",
        "theme": "adventure",
        "backgroundImage": "/images/backgrounds/treasurebg.jpg",
        "icon": "/images/icons/treasure.jpg",
        "description": "Solve riddles and find the hidden treasure!",
        "questions": [
            {
                "id": 1,
                "difficulty": "easy",
                "question": "I speak without a mouth and hear without ears. I have no body, but I come alive with the wind. What am I?",
                "options": [
                    {"id": "a", "text": "Water", "image": "/images/treasure/water.avif", "correct": False},
                    {"id": "b", "text": "Echo", "image": "/images/treasure/echo.jpg", "correct": True},
                    {"id": "c", "text": "Fire", "image": "/images/treasure/fire.avif", "correct": False},
                ],
                "explanation": "An echo has no physical form but can 'speak' (repeat sounds) and comes alive with wind carrying sound waves.",
            },
            {
                "id": 2,
                "difficulty": "medium",
                "question": "The more of me you take, the more you leave behind. What am I?",
                "options": [
                    {"id": "a", "text": "Time", "image": "/images/treasure/time.jpg", "correct": False},
                    {"id": "b", "text": "Shadow", "image": "/images/treasure/shadow.jpg", "correct": False},
                    {"id": "c", "text": "Footsteps", "image": "/images/treasure/footsteps.jpg", "correct": True},
                ],
                "explanation": "The more steps you take, the more footprints you leave behind you.",
            },
            {
                "id": 3,
                "difficulty": "hard",
                "question": "The person who makes it, sells it. The person who buys it never uses it. The person who uses it never knows they're using it. What is it?",
                "options": [
                    {"id": "a", "text": "Coffin", "image": "/images/treasure/coffin.jpg", "correct": True},
                    {"id": "b", "text": "Mirror", "image": "/images/treasure/mirror.jpg", "correct": False},
                    {"id": "c", "text": "Clock", "image": "/images/treasure/clock.jpg", "correct": False},
                ],
                "explanation": "A coffin maker sells it, relatives buy it, but the deceased person using it is unaware.",
            },
            {
                "id": 4,
                "difficulty": "medium",
                "question": "I have cities but no houses, forests but no trees, and rivers but no water. What am I?",
                "options": [
                    {"id": "a", "text": "Book", "image": "/images/treasure/book.jpg", "correct": False},
                    {"id": "b", "text": "Painting", "image": "/images/treasure/painting.jpg", "correct": False},
                    {"id": "c", "text": "Map", "image": "/images/treasure/map.jpg", "correct": True},
                ],
                "explanation": "A map shows cities, forests, and rivers but contains none of the actual physical elements.",
            },
        ],
    },
    "programming": {
        "name": "Programming Quiz",
        "theme": "tech",
        "backgroundImage": "linear-gradient(45deg, #0f0f23 0%, #1a1a2e 50%, #16213e 100%)",
        "icon": "/images/icons/programming.jpg",
        "description": "Test your coding knowledge and skills!",
        "questions": [
            {
                "id": 1,
                "question": "Which of the following is the correct way to declare a variable in C?",
                "codeExample": "// Variable declaration in C",
                "options": [
                    {"id": "a", "text": "int x = 5;", "code": True, "correct": False},
                    {"id": "b", "text": "x int;", "code": True, "correct": False},
                    {"id": "c", "text": "int x;", "code": True, "correct": True},
                    {"id": "d", "text": "integer x;", "code": True, "correct": False},
                ],
                "explanation": "'int x;' is the correct declaration syntax. 'int x = 5;' is declaration with initialization.",
            },
            {
                "id": 2,
                "question": "What is the correct HTML tag for inserting an image?",
                "options": [
                    {"id": "a", "text": '<img src="image.jpg">', "code": True, "correct": True},
                    {"id": "b", "text": '<image src="image.jpg">', "code": True, "correct": False},
                    {"id": "c", "text": '<picture src="image.jpg">', "code": True, "correct": False},
                    {"id": "d", "text": '<img href="image.jpg">', "code": True, "correct": False},
                ],
                "explanation": "The <img> tag with src attribute is the standard way to insert images in HTML.",
            },
            {
                "id": 3,
                "question": "Which CSS property controls the text color?",
                "options": [
                    {"id": "a", "text": "text-color", "code": True, "correct": False},
                    {"id": "b", "text": "color", "code": True, "correct": True},
                    {"id": "c", "text": "font-color", "code": True, "correct": False},
                    {"id": "d", "text": "text-style", "code": True, "correct": False},
                ],
                "explanation": "The 'color' property is used to set the text color in CSS.",
            },
            {
                "id": 4,
                "question": "What is the correct syntax to write a main function in C?",
                "options": [
                    {"id": "a", "text": "int main() {}", "code": True, "correct": True},
                    {"id": "b", "text": "void main() {}", "code": True, "correct": False},
                    {"id": "c", "text": "main() {}", "code": True, "correct": False},
                    {"id": "d", "text": "int main[] {}", "code": True, "correct": False},
                ],
                "explanation": "'int main()' is the standard entry point function in C programs.",
            },
        ],
    },
    "mythology": {
        "name": "Indian Mythology",
        "theme": "traditional",
        "backgroundImage": "/images/backgrounds/mythologybg.jpg",
        "icon": "/images/icons/mythology.jpg",
        "description": "Explore the wisdom of ancient Indian epics!",
        "questions": [
            {
                "id": 1,
                "question": "Who carried Lord Rama and Lakshmana to Lanka on his back?",
                "sanskritQuote": "धर्मो रक्षति रक्षितः।",
                "translation": "Dharma protects those who protect it.",
                "options": [
                    {"id": "a", "text": "Hanuman", "image": "/images/mythology/hanuman.jpg", "correct": True},
                    {"id": "b", "text": "Vibhishana", "image": "/images/mythology/vibhishana.jpg", "correct": False},
                    {"id": "c", "text": "Jatayu", "image": "/images/mythology/jatayu.jpg", "correct": False},
                    {"id": "d", "text": "Garuda", "image": "/images/mythology/garuda.jpg", "correct": False},
                ],
                "explanation": "Hanuman, the devoted follower of Rama, carried both brothers to Lanka during their mission to rescue Sita.",
            },
            {
                "id": 2,
                "question": "Who was the guru of the Pandavas and Kauravas in archery?",
                "sanskritQuote": "सर्वं ज्ञानं मयि स्थितं।",
                "translation": "All knowledge resides within me.",
                "options": [
                    {"id": "a", "text": "Kripacharya", "image": "/images/mythology/kripacharya.jpg", "correct": False},
                    {"id": "b", "text": "Dronacharya", "image": "/images/mythology/dronacharya.jpg", "correct": True},
                    {"id": "c", "text": "Bhishma", "image": "/images/mythology/bhishma.jpg", "correct": False},
                    {"id": "d", "text": "Karna", "image": "/images/mythology/karna.jpg", "correct": False},
                ],
                "explanation": "Dronacharya was the master archer who taught both the Pandavas and Kauravas the art of archery.",
            },
            {
                "id": 3,
                "question": "Who broke Lord Shiva's bow to marry Sita?",
                "sanskritQuote": "न हि ज्ञानेन सदृशं पवित्रमिह विद्यते।",
                "translation": "There is nothing more purifying in this world than knowledge.",
                "options": [
                    {"id": "a", "text": "King Bharata", "image": "/images/mythology/bharata.jpg", "correct": False},
                    {"id": "b", "text": "Ravana", "image": "/images/mythology/ravana.jpg", "correct": False},
                    {"id": "c", "text": "Lord Rama", "image": "/images/mythology/rama.jpg", "correct": True},
                    {"id": "d", "text": "Vishwamitra", "image": "/images/mythology/vishwamitra.jpg", "correct": False},
                ],
                "explanation": "Lord Rama broke the Pinaka (Shiva's bow) in Janaka's court to win Sita's hand in marriage.",
            },
            {
                "id": 4,
                "question": "Who was the charioteer of Arjuna in the Mahabharata?",
                "sanskritQuote": "कर्मण्येवाधिकारस्ते मा फलेषु कदाचन।",
                "translation": "You have the right to perform your duty, but not to expect the fruits of your actions.",
                "options": [
                    {"id": "a", "text": "Bhishma", "image": "/images/mythology/bhishma.jpg", "correct": False},
                    {"id": "b", "text": "Dronacharya", "image": "/images/mythology/dronacharya.jpg", "correct": False},
                    {"id": "c", "text": "Krishna", "image": "/images/mythology/krishna.jpg", "correct": True},
                    {"id": "d", "text": "Karna", "image": "/images/mythology/karna.jpg", "correct": False},
                ],
                "explanation": "Lord Krishna served as Arjuna's charioteer and delivered the Bhagavad Gita during the Kurukshetra war.",
            },
        ],
    },
}
