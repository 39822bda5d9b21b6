"""
Tables de référence du linter.

Constantes immuables uniquement : elles ne parviennent au scan qu'à travers
LintOptions.
"""

DEFAULT_REFERENCE_LANGUAGE = "en"

# Séries de ponctuation terminale (., !, ?) à partir de cette longueur
DEFAULT_PUNCTUATION_THRESHOLD = 3

# Mots anglais courants dans les dialogues.
# Exclus : les mots qui existent aussi dans les langues cibles à alphabet
# latin (a, no, do, in, on, as, me, he, has, was, will, come, my, we, to,
# still...) et les salutations gardées telles quelles (hello, ok, bye).
DEFAULT_REFERENCE_WORDS = frozenset(
    {
        # Articles, pronoms, déterminants
        "the", "you", "your", "yours", "they", "them", "their", "she", "him",
        "his", "our", "this", "that", "these", "those", "mine", "myself",
        "yourself", "everyone", "someone", "something", "nothing",
        "everything", "anything", "nobody",
        # Verbes auxiliaires et modaux
        "is", "are", "were", "been", "being", "have", "had", "having", "does",
        "did", "would", "could", "should", "must", "might", "shall",
        # Interrogatifs
        "what", "where", "when", "why", "who", "which", "how",
        # Conjonctions et prépositions
        "and", "with", "without", "from", "about", "because", "into",
        "through", "after", "before", "between", "until", "while", "of",
        # Adverbes
        "just", "really", "very", "there", "here", "then", "now", "never",
        "always", "again", "already", "maybe", "too",
        # Vocabulaire de dialogue
        "yes", "yeah", "please", "thank", "thanks", "sorry", "goodbye",
        "friend", "friends", "know", "think", "want", "need", "going",
        "gonna", "wanna", "gotta", "look", "said", "tell", "right",
    }
)
