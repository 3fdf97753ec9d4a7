"""
Interactive prompting.

:mod:`commitwizard.prompts.questions` drives an ordered list of question
specifications; :mod:`commitwizard.prompts.backend` renders them in the
terminal.
"""

from .backend import QuestionaryBackend  # noqa: F401
from .questions import Question, ask_questions  # noqa: F401
