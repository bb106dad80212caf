"""
chatbot/read.py
- Purpose: Read-side DB operations for Chatbot.
"""

from sqlalchemy.orm import Session

from docstatus.models.chatbot import Chatbot


class ChatbotReadRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, chatbot_id) -> Chatbot | None:
        return self.db.query(Chatbot).filter(Chatbot.id == chatbot_id).first()
