# taglines.py

DEFAULT_TAGLINES = [
    "The AI-native investor intelligence platform.",
    "Bloomberg terminal for the AI era.",
    "From idea to conviction in minutes.",
    "Intelligent AI agent for the intelligent investor.",
    "Insight without the institutional overhead.",
    "Know the business—not just the balance sheet.",
    "Where qualitative context meets quantitative clarity.",
]

WAITLIST_TAGLINE = ["Join the waitlist."]

LOGO_TEXT = "F I N A N T I C"
