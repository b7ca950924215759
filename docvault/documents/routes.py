
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from docvault.auth.deps import get_db, get_current_identity
from docvault.schemas.document import DocumentCreate, DocumentUpdate, DocumentOut, MessageOut
from docvault.documents import service
from docvault.utils.security import TokenPayload

router = APIRouter(prefix="/docs", tags=["documents"])

@router.post("", response_model=DocumentOut, status_code=status.HTTP_201_CREATED)
def create_document(body: DocumentCreate, db: Session = Depends(get_db), identity: TokenPayload = Depends(get_current_identity)):
    return service.create_document(db, identity.user_id, body.title, body.content)

@router.get("", response_model=list[DocumentOut])
def list_documents(db: Session = Depends(get_db), identity: TokenPayload = Depends(get_current_identity)):
    return service.list_documents(db, identity.user_id)

@router.get("/{doc_id}", response_model=DocumentOut)
def get_document(doc_id: int, db: Session = Depends(get_db), identity: TokenPayload = Depends(get_current_identity)):
    return service.get_owned_document(db, identity.user_id, doc_id)

@router.put("/{doc_id}", response_model=DocumentOut)
def update_document(doc_id: int, body: DocumentUpdate, db: Session = Depends(get_db), identity: TokenPayload = Depends(get_current_identity)):
    return service.update_document(db, identity.user_id, doc_id, content=body.content, title=body.title)

@router.delete("/{doc_id}", response_model=MessageOut)
def delete_document(doc_id: int, db: Session = Depends(get_db), identity: TokenPayload = Depends(get_current_identity)):
    service.delete_document(db, identity.user_id, doc_id)
    return MessageOut(message="Document deleted")
