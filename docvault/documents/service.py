"""Owner-scoped document operations.

Every lookup filters on ``(id, owner_id)`` in one statement, so a document
that belongs to someone else is indistinguishable from one that does not
exist. Both raise the same ``NotFoundError``.
"""

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from docvault.errors import InvalidTokenError, NotFoundError
from docvault.models.document import Document

logger = structlog.get_logger()

DOCUMENT_NOT_FOUND = "Document not found or unauthorized"
MAX_DOCUMENT_ID = 2**63 - 1


def create_document(db: Session, owner_id: int, title: str, content: str = "") -> Document:
    doc = Document(owner_id=owner_id, title=title, content=content or "")
    db.add(doc)
    try:
        db.commit()
    except IntegrityError:
        # owner row is gone; the credential no longer names a real user
        db.rollback()
        raise InvalidTokenError()
    db.refresh(doc)
    logger.info("document_created", user_id=owner_id, document_id=doc.id)
    return doc


def list_documents(db: Session, owner_id: int) -> list[Document]:
    return (db.query(Document)
              .filter(Document.owner_id == owner_id)
              .order_by(Document.created_at.asc(), Document.id.asc())
              .all())


def get_owned_document(db: Session, owner_id: int, doc_id: int) -> Document:
    if not 1 <= doc_id <= MAX_DOCUMENT_ID:
        # can't be a stored key; the driver would overflow on it
        raise NotFoundError(DOCUMENT_NOT_FOUND)
    doc = db.query(Document).filter(
        Document.id == doc_id,
        Document.owner_id == owner_id,
    ).first()
    if doc is None:
        raise NotFoundError(DOCUMENT_NOT_FOUND)
    return doc


def update_document(db: Session, owner_id: int, doc_id: int, content: str, title: str | None = None) -> Document:
    doc = get_owned_document(db, owner_id, doc_id)
    if title is not None:
        doc.title = title
    doc.content = content
    doc.touch()
    db.commit(); db.refresh(doc)
    logger.info("document_updated", user_id=owner_id, document_id=doc.id)
    return doc


def delete_document(db: Session, owner_id: int, doc_id: int) -> None:
    doc = get_owned_document(db, owner_id, doc_id)
    db.delete(doc)
    db.commit()
    logger.info("document_deleted", user_id=owner_id, document_id=doc_id)
