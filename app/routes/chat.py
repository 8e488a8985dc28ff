import logging
from typing import Dict, List

import openai
from fastapi import APIRouter, Depends, HTTPException

from app.config import HISTORY_LIMIT, MAX_TOKENS, OPENAI_MODEL
from app.dependencies.provider import get_openai_client
from app.errors import ProviderError
from app.models.error_models import ErrorResponse
from app.models.recipe.chat_models import ChatRequest, ChatResponse
from app.utils.prompt_utils import build_messages
from app.utils.recipe_utils import extract_recipe

router = APIRouter()

FAILURE_DETAIL = "Failed to process request"


async def ask_chef(openai_client: openai.AsyncOpenAI, messages: List[Dict[str, str]]) -> str:
    """
    Send one chat completion request and return the reply text.
    Any failure is raised as ProviderError; nothing is retried.
    """
    try:
        completion = await openai_client.chat.completions.create(
            model=OPENAI_MODEL,
            max_tokens=MAX_TOKENS,
            messages=messages,
        )
    except openai.OpenAIError as e:
        raise ProviderError(f"Provider call failed: {e}") from e

    if not completion.choices:
        raise ProviderError("Provider returned no choices")
    return completion.choices[0].message.content or ""


@router.post("/chat", tags=["Chat"], response_model=ChatResponse,
             responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def chat(request: ChatRequest, openai_client: openai.AsyncOpenAI = Depends(get_openai_client)):
    """
    Relay a conversation to the chef model and return its reply.
    A recipe embedded in the reply is returned separately and removed from the text.
    """
    messages = build_messages(request.region, request.history, request.message, HISTORY_LIMIT)

    try:
        content = await ask_chef(openai_client, messages)
        response, recipe = extract_recipe(content)
    except ProviderError as e:
        logging.error(f"Chat provider error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=FAILURE_DETAIL)
    except Exception as e:
        logging.error(f"Chat error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=FAILURE_DETAIL)

    return ChatResponse(response=response, recipe=recipe)
