"""NiceGUI interface - thin visualization layer for the chat session.

Renders whatever the session controller exposes and re-renders on every
session state change.

Responsibilities:
    - Message bubbles with a typing indicator while a reply is revealed
    - Text input, send button with loading state, and "New Chat"
    - Conversation id badge and dark/light toggle
    - Error toasts for failed sends

Contains no business logic. Delegates all operations to the controller.
"""
