"""API routers package"""

from . import career_assessment
from . import roadmap
from . import activity
from . import users

__all__ = ["career_assessment", "roadmap", "activity", "users"]
