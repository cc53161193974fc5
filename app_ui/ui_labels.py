"""
Centralized UI labels for the forum.
Keep copy consistent across components.
"""

APP_TITLE = "Forum App"
SIGN_OUT = "Sign Out"
LOADING = "Loading..."

# Auth form
AUTH_TITLE = "Sign in to the forum"
AUTH_EMAIL = "Email"
AUTH_PASSWORD = "Password"
AUTH_SIGN_IN = "Sign In"
AUTH_SIGN_UP = "Sign Up"
AUTH_CHECK_EMAIL = "Check your email to confirm the account"
AUTH_FAILED = "Authentication failed"

# Catalog
FILTER_ICONS = {
    "all": "forum",
    "answered": "check",
    "unanswered": "close",
}
ASK_QUESTION = "Ask Question"
CATALOG_LOADING = "Loading questions..."
CATALOG_EMPTY = "No questions found. Be the first to ask one!"
STATUS_ANSWERED = "Answered"
STATUS_UNANSWERED = "Unanswered"

# Create question dialog
DIALOG_TITLE = "Ask a Question"
DIALOG_TITLE_LABEL = "Title"
DIALOG_TITLE_PLACEHOLDER = "What's your question?"
DIALOG_DETAILS_LABEL = "Details"
DIALOG_DETAILS_PLACEHOLDER = "Provide more details about your question..."
DIALOG_SUBMIT = "Post Question"
DIALOG_CANCEL = "Cancel"
POSTING = "Posting..."

# Detail
BACK_TO_QUESTIONS = "Back to Questions"
POSTED_ON = "Posted on"
YOUR_ANSWER = "Your Answer"
ANSWER_PLACEHOLDER = "Write your answer here..."
POST_ANSWER = "Post Answer"
QUESTION_NOT_FOUND = "Question not found"

# Generic failures (all remote errors collapse to these)
FAILED_LOAD_QUESTIONS = "Failed to load questions"
FAILED_LOAD_QUESTION = "Failed to load question"
FAILED_CREATE_QUESTION = "Failed to create question"
FAILED_SUBMIT_ANSWER = "Failed to submit answer"
FAILED_VOTE = "Failed to vote"
FAILED_DELETE_ANSWER = "Failed to delete answer"
FAILED_DELETE_QUESTION = "Failed to delete question"
FAILED_SIGN_OUT = "Failed to sign out"
