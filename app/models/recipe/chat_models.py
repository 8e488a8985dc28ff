from typing import List, Literal, Optional

from pydantic import BaseModel

from app.models.recipe.recipe_models import Recipe


class ConversationTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    message: str
    # a region tag or "all"; forwarded as prompt context only
    region: str = "all"
    history: List[ConversationTurn] = []


class ChatResponse(BaseModel):
    response: str
    recipe: Optional[Recipe] = None
