# careerguide/core/config.py
from pydantic_settings import BaseSettings
from typing import Optional, List, Union

class Settings(BaseSettings):
    # API Settings
    PROJECT_NAME: str = "CareerGuide API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Career Assessment and Roadmap Service"

    # Storage backend: "firestore" in deployments, "memory" for local runs
    STORAGE_BACKEND: str = "firestore"
    # User ids registered at startup by the memory backend
    MEMORY_SEED_USERS: Union[str, List[str]] = []

    # Firebase Configuration (only needed for the firestore backend)
    FIREBASE_CONFIG__type: str = "service_account"
    FIREBASE_CONFIG__project_id: Optional[str] = None
    FIREBASE_CONFIG__private_key_id: Optional[str] = None
    FIREBASE_CONFIG__private_key: Optional[str] = None
    FIREBASE_CONFIG__client_email: Optional[str] = None
    FIREBASE_CONFIG__client_id: Optional[str] = None
    FIREBASE_CONFIG__auth_uri: str = "https://accounts.google.com/o/oauth2/auth"
    FIREBASE_CONFIG__token_uri: str = "https://oauth2.googleapis.com/token"
    FIREBASE_CONFIG__auth_provider_x509_cert_url: str = "https://www.googleapis.com/oauth2/v1/certs"
    FIREBASE_CONFIG__client_x509_cert_url: Optional[str] = None

    # Firestore collections
    USERS_COLLECTION: str = "users"
    ASSESSMENTS_COLLECTION: str = "assessments"
    ROADMAPS_COLLECTION: str = "roadmaps"
    ACTIVITY_LOGS_COLLECTION: str = "activity_logs"

    # CORS Settings
    BACKEND_CORS_ORIGINS: Union[str, List[str]] = ["*"]

    # Activity Settings
    ACTIVITY_CACHE_PER_USER: int = 50
    ACTIVITY_CACHE_MAX_USERS: int = 1000
    ACTIVITY_DEFAULT_LIMIT: int = 20

    # Application Settings
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    @property
    def firebase_credentials(self) -> dict:
        """Get Firebase credentials as a dictionary"""
        return {
            "type": self.FIREBASE_CONFIG__type,
            "project_id": self.FIREBASE_CONFIG__project_id,
            "private_key_id": self.FIREBASE_CONFIG__private_key_id,
            "private_key": (self.FIREBASE_CONFIG__private_key or "").replace("\\n", "\n"),
            "client_email": self.FIREBASE_CONFIG__client_email,
            "client_id": self.FIREBASE_CONFIG__client_id,
            "auth_uri": self.FIREBASE_CONFIG__auth_uri,
            "token_uri": self.FIREBASE_CONFIG__token_uri,
            "auth_provider_x509_cert_url": self.FIREBASE_CONFIG__auth_provider_x509_cert_url,
            "client_x509_cert_url": self.FIREBASE_CONFIG__client_x509_cert_url
        }

    @property
    def cors_origins(self) -> List[str]:
        """Get CORS origins as a list"""
        if isinstance(self.BACKEND_CORS_ORIGINS, str):
            # If it's a string, split by comma and strip whitespace
            if self.BACKEND_CORS_ORIGINS == "*":
                return ["*"]
            return [origin.strip() for origin in self.BACKEND_CORS_ORIGINS.split(",")]
        return self.BACKEND_CORS_ORIGINS

    @property
    def seed_user_ids(self) -> List[str]:
        if isinstance(self.MEMORY_SEED_USERS, str):
            return [uid.strip() for uid in self.MEMORY_SEED_USERS.split(",") if uid.strip()]
        return self.MEMORY_SEED_USERS

    @property
    def uses_firestore(self) -> bool:
        return self.STORAGE_BACKEND.strip().lower() == "firestore"

    class Config:
        case_sensitive = True
        env_file = ".env"
        env_parse_none_str = None

# Global settings instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get settings instance (singleton pattern)"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
