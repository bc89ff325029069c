# careerguide/core/firebase.py
import logging
import firebase_admin
from firebase_admin import credentials, firestore
from careerguide.core.config import get_settings
from typing import Optional

logger = logging.getLogger(__name__)

# Global Firebase client
_firestore_client: Optional[firestore.Client] = None

def get_firestore_client() -> firestore.Client:
    """Initialize and return Firestore client (singleton pattern)"""
    global _firestore_client

    if _firestore_client is None:
        settings = get_settings()

        # Create credentials from settings
        cred = credentials.Certificate(settings.firebase_credentials)

        # Initialize Firebase app if not already initialized
        if not firebase_admin._apps:
            firebase_admin.initialize_app(cred)

        _firestore_client = firestore.client()

    return _firestore_client

def initialize_firebase():
    """Initialize Firebase (call this at app startup)"""
    get_firestore_client()
    logger.info("Firebase initialized successfully")

def close_firestore_client():
    """Drop the cached client and delete the Firebase app (app shutdown / tests)"""
    global _firestore_client
    if _firestore_client is not None:
        _firestore_client = None
        logger.info("Firestore client released")

    if firebase_admin._apps:
        firebase_admin.delete_app(firebase_admin.get_app())
        logger.info("Firebase app deleted")
