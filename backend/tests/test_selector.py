from app.models.quiz import Difficulty, Option, Question, Quiz
from app.models.session import AnswerRecord, QuizSession
from app.services.selector import accuracy, select_next, target_difficulty


def _q(qid, difficulty=None):
    return Question(
        id=qid,
        prompt=f"Q{qid}",
        options=(Option(id="a", text="A", correct=True), Option(id="b", text="B")),
        difficulty=difficulty,
    )


def _answers(pattern):
    return [
        AnswerRecord(question_id=100 + i, selected_option="a" if ok else "b", is_correct=ok, timestamp=i)
        for i, ok in enumerate(pattern)
    ]


def _session(quiz_id="q", answers=None):
    return QuizSession(id="s1", quiz_id=quiz_id, start_time=0, answers=list(answers or []))


def test_accuracy_defaults_to_neutral_prior():
    assert accuracy([]) == 0.5


def test_target_difficulty_thresholds():
    assert target_difficulty(0.8) == Difficulty.hard
    assert target_difficulty(0.79) == Difficulty.medium
    assert target_difficulty(0.5) == Difficulty.medium
    assert target_difficulty(0.49) == Difficulty.easy
    assert target_difficulty(0.0) == Difficulty.easy


def test_first_question_targets_medium(catalog):
    quiz = catalog.get_quiz("sample")
    q = select_next(quiz, _session("sample"))
    assert q.id == 2
    assert q.difficulty == Difficulty.medium


def test_high_accuracy_prefers_hard_over_easy():
    # nine of ten answered correctly -> accuracy 0.9
    history = _answers([True] * 9 + [False])
    answered = [_q(100 + i) for i in range(10)]
    quiz = Quiz(id="q", name="Q", theme="t", questions=tuple(answered + [_q(1, Difficulty.easy), _q(2, Difficulty.hard)]))

    q = select_next(quiz, _session(answers=history))
    assert q.id == 2


def test_low_accuracy_prefers_easy():
    history = _answers([False])
    quiz = Quiz(
        id="q",
        name="Q",
        theme="t",
        questions=(_q(100), _q(1, Difficulty.hard), _q(2, Difficulty.medium), _q(3, Difficulty.easy)),
    )
    assert select_next(quiz, _session(answers=history)).id == 3


def test_falls_back_to_first_unanswered_in_catalog_order():
    history = _answers([True])
    quiz = Quiz(id="q", name="Q", theme="t", questions=(_q(100), _q(7), _q(5, Difficulty.easy)))
    # target is hard; nothing tagged hard remains
    assert select_next(quiz, _session(answers=history)).id == 7


def test_untagged_questions_are_served_in_order(catalog):
    quiz = catalog.get_quiz("untagged")
    assert select_next(quiz, _session("untagged")).id == 10


def test_returns_none_when_exhausted():
    history = _answers([True, True])
    quiz = Quiz(id="q", name="Q", theme="t", questions=(_q(100), _q(101)))
    assert select_next(quiz, _session(answers=history)) is None


def test_selection_is_deterministic_and_side_effect_free(catalog):
    quiz = catalog.get_quiz("sample")
    session = _session("sample", answers=[AnswerRecord(question_id=2, selected_option="a", is_correct=True, timestamp=1)])
    before = list(session.answers)

    first = select_next(quiz, session)
    second = select_next(quiz, session)

    assert first == second
    assert first.id == 3
    assert session.answers == before
