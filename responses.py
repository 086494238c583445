# responses.py

# Used when the default-response file is missing, unreadable or empty.
FALLBACK_RESPONSE = "Could you elaborate on that?"

# No keyword response is longer than 5 lines, no default response longer than 10.
MAX_RESPONSE_LINES = 5
MAX_DEFAULT_LINES = 10

welcome_text = (
    "Welcome to the Technical Support System.\n"
    "Please tell us about your problem. We will assist you with whatever "
    "problem you might have.\n"
    "Please type 'bye' to exit our system."
)

farewell_text = "Nice talking to you. Bye..."

QUIT_WORD = "bye"
