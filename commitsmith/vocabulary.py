"""Fixed vocabularies used by the commit message policy.

Contains:
- KEYWORDS: Reserved words wrapped in backticks when they appear as standalone words
- VERBS: Past-tense verbs a commit message may start with
"""

# Reserved language keywords and pseudo-variables
KEYWORDS = (
    "__ENCODING__",
    "__LINE__",
    "__FILE__",
    "BEGIN",
    "END",
    "alias",
    "and",
    "begin",
    "break",
    "case",
    "class",
    "def",
    "defined?",
    "do",
    "else",
    "elsif",
    "end",
    "ensure",
    "false",
    "if",
    "module",
    "next",
    "nil",
    "not",
    "or",
    "redo",
    "rescue",
    "retry",
    "return",
    "self",
    "super",
    "then",
    "true",
    "undef",
    "unless",
    "until",
    "when",
    "while",
    "yield",
)

# Accepted leading verbs (past simple)
VERBS = (
    "Added",
    "Changed",
    "Fixed",
    "Removed",
    "Updated",
    "Refactored",
    "Renamed",
)
