"""Configuration for Spanish language checking.

Defines the engine rules disabled by default and the words that are never
reported as misspellings when checking Spanish documents.
"""

# Default rules to disable (can be extended via command-line arguments)
DEFAULT_DISABLED_RULES = {
    # Sentence-start casing is unreliable on headings and list items.
    "UPPERCASE_SENTENCE_START",
    # Markdown tables and code blocks produce runs of spaces.
    "WHITESPACE_RULE",
    "TOO_LONG_PARAGRAPH",
}


# Default words to ignore (case-sensitive; can be extended via command-line)
DEFAULT_IGNORED_WORDS = {
    # --- Engine / project names ---
    "LanguageTool", "Morfologik", "Hunspell",

    # --- Technical acronyms common in Spanish technical prose ---
    "API", "APIs", "URL", "URLs", "JSON", "CSV", "PDF", "HTML",

    # --- Anglicisms accepted in technical writing ---
    "software", "hardware", "online", "e-mail",

    # --- Regional place names ---
    "Ñuñoa", "Xochimilco", "Tegucigalpa",
}
