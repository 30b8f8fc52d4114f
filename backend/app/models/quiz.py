import enum
from dataclasses import dataclass, field


class Difficulty(str, enum.Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


@dataclass(frozen=True)
class Option:
    id: str
    text: str
    correct: bool = False
    image: str | None = None
    code: bool = False


@dataclass(frozen=True)
class Question:
    id: int
    prompt: str
    options: tuple[Option, ...]
    difficulty: Difficulty | None = None
    explanation: str | None = None

    sanskrit_quote: str | None = None
    translation: str | None = None
    code_example: str | None = None

    def find_option(self, option_id: str) -> Option | None:
        for opt in self.options:
            if opt.id == option_id:
                return opt
        return None


@dataclass(frozen=True)
class Quiz:
    id: str
    name: str
    theme: str
    questions: tuple[Question, ...] = field(default_factory=tuple)
    description: str = ""
    icon: str | None = None
    background_image: str | None = None

    @property
    def total_questions(self) -> int:
        return len(self.questions)
