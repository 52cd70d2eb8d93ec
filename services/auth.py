"""Local stand-in for the external authentication provider.

Holds the signed-in identity in a mutable mapping (the Streamlit session state
in the app, a plain dict in tests). The router only reads `state()` and calls
`sign_out()`; everything else is used by the sign-in/sign-up screens.
"""
import logging
import uuid
from typing import Any, MutableMapping, Optional

from domain.models import AuthState, AuthUser

logger = logging.getLogger(__name__)

_USER_KEY = 'auth_user'
_LOADING_KEY = 'auth_loading'
_NAMESPACE = uuid.UUID('6f1c9a52-3c1e-4c55-9a7e-2b1f0d6e8a11')


def user_id_for_email(email: str) -> str:
    return str(uuid.uuid5(_NAMESPACE, email.strip().lower()))


class LocalAuthProvider:
    def __init__(self, store: MutableMapping[str, Any]):
        self.store = store

    def state(self) -> AuthState:
        user: Optional[AuthUser] = self.store.get(_USER_KEY)
        return AuthState(user=user, is_loading=bool(self.store.get(_LOADING_KEY, False)),
                         is_authenticated=user is not None)

    def set_loading(self, loading: bool):
        self.store[_LOADING_KEY] = loading

    def sign_in(self, email: str, display_name: Optional[str] = None,
                access_token: Optional[str] = None) -> AuthUser:
        meta = {'full_name': display_name} if display_name else {}
        if access_token:
            meta['access_token'] = access_token
        user = AuthUser(id=user_id_for_email(email), email=email.strip(), user_metadata=meta)
        self.store[_USER_KEY] = user
        logger.info("Auth event: SIGNED_IN %s", user.email)
        return user

    def sign_up(self, email: str, full_name: str) -> AuthUser:
        return self.sign_in(email, display_name=full_name)

    def sign_out(self):
        user = self.store.pop(_USER_KEY, None)
        if user is not None:
            logger.info("Auth event: SIGNED_OUT %s", user.email)
