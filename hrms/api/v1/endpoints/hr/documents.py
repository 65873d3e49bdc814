from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.database import get_async_session
from hrms.services.hr.document_service import DocumentService
from hrms.schemas.hr.document_schema import DocumentCreate, DocumentUpdate, DocumentResponse

router = APIRouter()

@router.post("/", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    document: DocumentCreate,
    session: AsyncSession = Depends(get_async_session),
):
    """Register a document; the upload date is set by the server"""
    service = DocumentService(session)
    return await service.create(document)

@router.get("/", response_model=List[DocumentResponse])
async def get_documents(
    employee_id: Optional[int] = Query(None),
    session: AsyncSession = Depends(get_async_session),
):
    service = DocumentService(session)
    if employee_id is not None:
        return await service.get_documents_by_employee(employee_id)
    return await service.get_all()

@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    service = DocumentService(session)
    document = await service.get(document_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return document

@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: int,
    document: DocumentUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    service = DocumentService(session)
    updated = await service.update(document_id, document)
    if updated is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return updated

@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: int,
    session: AsyncSession = Depends(get_async_session),
):
    service = DocumentService(session)
    if not await service.delete(document_id):
        raise HTTPException(status_code=404, detail="Document not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
