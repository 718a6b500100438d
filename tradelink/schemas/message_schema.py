"""메시지/채팅 스키마"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_MESSAGE_LENGTH = 4000


class MessageCreate(BaseModel):
    """메시지 전송 요청"""
    recipient_id: str = Field(..., min_length=1, max_length=64)
    content: str = Field(..., min_length=1, max_length=MAX_MESSAGE_LENGTH)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Message content must not be blank")
        if "\0" in v:
            raise ValueError("Message content contains a disallowed character")
        return v


class MessageOut(BaseModel):
    """메시지 응답"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    sender_id: str
    recipient_id: str
    content: str
    created_at: Optional[datetime] = None


class ConversationPartner(BaseModel):
    """대화 상대"""
    user_id: str
    last_message_at: Optional[datetime] = None


class ConversationListResponse(BaseModel):
    conversations: List[ConversationPartner] = Field(default_factory=list)


class PresenceResponse(BaseModel):
    """접속 상태"""
    user_id: str
    online: bool
