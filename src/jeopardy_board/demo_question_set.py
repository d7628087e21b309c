# Area: Demo
"""
jeopardy_board.demo_question_set — Sample question set
======================================================

A complete, valid question-set document for trying the board without
authoring one. ``demo_question_set_document()`` returns a fresh copy of
the raw document each time, so callers may modify it freely.

    from jeopardy_board import load_question_set
    from jeopardy_board.demo_question_set import demo_question_set_document

    question_set = load_question_set(demo_question_set_document())
"""

import copy
from typing import Any, Dict, List, Tuple

# (title, [(answer, correct response), ... five clues ...])
_CATEGORIES: List[Tuple[str, List[Tuple[str, str]]]] = [
    ("Artists in Europe", [
        ("This Spanish surrealist is known for his melting clocks.", "Who is Salvador Dalí?"),
        ("His portrait of his mother hangs in the Musée d'Orsay.", "Who is James McNeill Whistler?"),
        ("He painted water lilies in his garden at Giverny.", "Who is Claude Monet?"),
        ("In 1639 he bought the Amsterdam house that is now his museum.", "Who is Rembrandt?"),
        ("He stayed with van Gogh at Arles in 1888.", "Who is Paul Gauguin?"),
    ]),
    ("It's the Little Things", [
        ("Founded in Pennsylvania in 1939, this youth baseball program went worldwide.", "What is Little League?"),
        ("The Japanese art of growing miniature trees.", "What is bonsai?"),
        ("This smallest unit of a chemical element keeps its properties.", "What is an atom?"),
        ("Jonathan Swift's island of tiny people.", "What is Lilliput?"),
        ("This tiny country is entirely surrounded by Rome.", "What is Vatican City?"),
    ]),
    ("Rivers", [
        ("This river flows through Cairo.", "What is the Nile?"),
        ("London sits on this river.", "What is the Thames?"),
        ("The longest river entirely in Europe.", "What is the Volga?"),
        ("This river forms much of the border between the U.S. and Mexico.", "What is the Rio Grande?"),
        ("Vienna, Budapest and Belgrade all lie on it.", "What is the Danube?"),
    ]),
    ("Science Class", [
        ("H2O is the chemical formula for it.", "What is water?"),
        ("The planet closest to the Sun.", "What is Mercury?"),
        ("The powerhouse of the cell.", "What is the mitochondrion?"),
        ("This force keeps the planets in orbit.", "What is gravity?"),
        ("Its symbol on the periodic table is Au.", "What is gold?"),
    ]),
    ("Word Origins", [
        ("From the Greek for 'deep sleep', it's a prolonged state of unconsciousness.", "What is a coma?"),
        ("From the Latin for 'bread', this word names someone you share bread with.", "What is companion?"),
        ("This greeting came from a shortening of 'God be with ye'.", "What is goodbye?"),
        ("Named for an Earl, it's meat between two slices of bread.", "What is a sandwich?"),
        ("This word for a wild panic comes from a Greek god of the woods.", "What is panic?"),
    ]),
    ("U.S. Presidents", [
        ("The first president of the United States.", "Who is George Washington?"),
        ("He delivered the Gettysburg Address.", "Who is Abraham Lincoln?"),
        ("The only president to serve more than two terms.", "Who is Franklin D. Roosevelt?"),
        ("He bought Louisiana from France.", "Who is Thomas Jefferson?"),
        ("The teddy bear was named for him.", "Who is Theodore Roosevelt?"),
    ]),
]

# (category index, clue index) of the two Daily Doubles
_DAILY_DOUBLES = {(0, 3), (4, 2)}

_FINAL_CLUE = {
    "categoryTitle": "World Capitals",
    "answer": "It became a national capital in 1960, built from scratch on a central plateau.",
    "correctResponse": "What is Brasília?",
}


def _build_document() -> Dict[str, Any]:
    categories = []
    for category_index, (title, clues) in enumerate(_CATEGORIES):
        categories.append({
            "title": title,
            "clues": [
                {
                    "pointValue": (clue_index + 1) * 200,
                    "answer": answer,
                    "correctResponse": response,
                    "isDailyDouble": (category_index, clue_index) in _DAILY_DOUBLES,
                    "isDone": False,
                }
                for clue_index, (answer, response) in enumerate(clues)
            ],
        })
    return {"categories": categories, "finalClue": dict(_FINAL_CLUE)}


_DOCUMENT = _build_document()


def demo_question_set_document() -> Dict[str, Any]:
    """Return a fresh copy of the sample document."""
    return copy.deepcopy(_DOCUMENT)
