from stackpilot.core.guards import is_affirmative


class ScriptedConfirmation:
    def __init__(self, answer: str):
        self.answer = answer
        self.questions: list[str] = []

    def ask(self, question: str) -> bool:
        self.questions.append(question)
        return is_affirmative(self.answer)
