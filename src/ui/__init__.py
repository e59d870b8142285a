"""NiceGUI interface - thin visualization layer over the conversation controller.

Responsibilities:
    - Provider and API key dialog, persisted per browser profile
    - PDF upload widget
    - Transcript display with markdown rendering for assistant replies
    - Busy indicator and error notifications

Contains no business logic; every action goes through ConversationController.
"""
