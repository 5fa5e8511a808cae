import firebase_admin
from firebase_admin import credentials, firestore
import logging
import os
import json

logger = logging.getLogger(__name__)

_db = None


def _load_credentials():
    if os.environ.get("FIREBASE_CREDENTIALS"):
        # Hosted deployments (env variable)
        cred_dict = json.loads(os.environ["FIREBASE_CREDENTIALS"])
        return credentials.Certificate(cred_dict)

    # Running locally (file)
    return credentials.Certificate(os.environ.get("FIREBASE_CREDENTIALS_FILE", "firebase-key.json"))


def get_db():
    """Shared Firestore client, initialised on first use."""
    global _db
    if _db is None:
        if not firebase_admin._apps:
            firebase_admin.initialize_app(_load_credentials())
            logger.info("Firebase app initialised")
        _db = firestore.client()
    return _db


def user_ref(user_id: str):
    return get_db().collection("users").document(user_id)
