"""Support question endpoint for the Mini App."""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import AliasChoices, BaseModel, Field, field_validator

from support_relay.services.domains import SupportRelayService

from .deps import get_support_service

support_router = APIRouter(tags=["support"])


class SupportQuestionRequest(BaseModel):
    # initData/question are the names older Mini App builds send
    launch_context: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("launchContext", "initData")
    )
    question_text: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("questionText", "question")
    )

    @field_validator("launch_context", mode="before")
    @classmethod
    def coerce_launch_context(cls, v):
        # Anything but a string fails verification as unsigned data
        return v if isinstance(v, str) or v is None else ""


@support_router.post("/support/question")
async def submit_support_question(
    request: SupportQuestionRequest,
    service: SupportRelayService = Depends(get_support_service),
):
    """Save a question and forward it to the operators."""
    ticket_id = await service.submit_question(request.launch_context, request.question_text)
    return {"success": True, "ticketId": ticket_id}
