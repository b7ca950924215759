
from fastapi import Request
from docvault.config import settings
from docvault.db.session import SessionLocal
from docvault.errors import AuthenticationError
from docvault.utils.security import TokenPayload, verify_token


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_current_identity(request: Request) -> TokenPayload:
    """Auth guard for protected routes.

    Resolves the session cookie to the caller's identity and keeps it on
    ``request.state`` for the rest of this request. Handlers receive it
    through ``Depends`` instead of reading shared state.
    """
    token = request.cookies.get(settings.cookie_name)
    if not token:
        raise AuthenticationError("Unauthorized: No token provided")

    identity = verify_token(token)
    request.state.identity = identity
    return identity
