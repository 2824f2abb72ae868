# FastAPI routers - emails, pattern, tutorial, health
from app.email_regex.presentation.api import emails, health, pattern, tutorial

__all__ = ["health", "emails", "pattern", "tutorial"]
