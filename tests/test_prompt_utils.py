from app.models.recipe.chat_models import ConversationTurn
from app.utils.prompt_utils import build_messages, build_system_prompt, region_context


def history(n: int) -> list[ConversationTurn]:
    return [
        ConversationTurn(role="user" if i % 2 == 0 else "assistant", content=f"turn {i}")
        for i in range(n)
    ]


def test_region_context_known_region() -> None:
    got = region_context("asian")
    assert got == (
        "The user is currently exploring Asian cuisine "
        "(Chinese, Japanese, Korean, Thai, Vietnamese, Indian)."
    )


def test_region_context_all() -> None:
    assert region_context("all") == "The user is exploring cuisines from all regions."


def test_region_context_unknown_region_is_forwarded() -> None:
    assert region_context("nordic") == "The user is interested in nordic cuisine."


def test_system_prompt_asks_for_recipe_block() -> None:
    prompt = build_system_prompt("european")
    assert "```recipe" in prompt
    assert "Italian, French, Spanish" in prompt
    assert '"servings": 4' in prompt


def test_build_messages_order() -> None:
    messages = build_messages("all", history(3), "And dessert?")
    assert messages[0]["role"] == "system"
    assert [m["content"] for m in messages[1:]] == ["turn 0", "turn 1", "turn 2", "And dessert?"]
    assert messages[-1]["role"] == "user"
    assert messages[2]["role"] == "assistant"


def test_build_messages_history_limit() -> None:
    messages = build_messages("all", history(6), "Next", history_limit=2)
    assert [m["content"] for m in messages[1:]] == ["turn 4", "turn 5", "Next"]


def test_build_messages_without_history() -> None:
    messages = build_messages("all", [], "Hi chef")
    assert messages[1:] == [{"role": "user", "content": "Hi chef"}]
