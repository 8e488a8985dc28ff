from typing import Dict, List

from app.models.recipe.chat_models import ConversationTurn
from app.models.region.region_models import ALL_REGIONS, REGIONS_BY_ID

RECIPE_BLOCK_FORMAT = """```recipe
{
  "name": "Recipe Name",
  "region": "african|asian|european|latin-american|middle-eastern|southern|soul-food|cajun-creole|tex-mex|bbq|new-england|midwest|oceanian|caribbean",
  "cuisine": "Specific Cuisine (e.g., Italian, Thai)",
  "description": "Brief appetizing description",
  "prepTime": "15 mins",
  "cookTime": "30 mins",
  "servings": 4,
  "difficulty": "Easy|Medium|Hard",
  "ingredients": [
    {"name": "ingredient", "amount": "1", "unit": "cup", "notes": "optional notes"}
  ],
  "instructions": [
    "Step 1 instruction",
    "Step 2 instruction"
  ],
  "tips": ["Helpful tip 1", "Helpful tip 2"],
  "tags": ["tag1", "tag2"]
}
```"""


def region_context(region: str) -> str:
    if not region or region == ALL_REGIONS:
        return "The user is exploring cuisines from all regions."
    info = REGIONS_BY_ID.get(region)
    if info is None:
        return f"The user is interested in {region} cuisine."
    return f"The user is currently exploring {info.name} cuisine ({', '.join(info.cuisines)})."


def build_system_prompt(region: str) -> str:
    return f"""You are Chef AI, a friendly and knowledgeable culinary assistant who helps home cooks discover and master recipes from around the world.

Your personality:
- Warm, encouraging, and passionate about food
- Share interesting cultural context about dishes
- Offer practical tips for home cooks
- Suggest ingredient substitutions when appropriate
- Consider dietary restrictions when mentioned

{region_context(region)}

When recommending a specific recipe, ALWAYS include exactly one JSON block with the recipe details in this exact format:
{RECIPE_BLOCK_FORMAT}

Guidelines:
- Keep responses conversational but informative
- Include the recipe JSON block only when sharing a specific recipe
- Offer to modify recipes based on dietary needs
- Share cooking tips and cultural background
- Be encouraging to beginner cooks"""


def build_messages(region: str, history: List[ConversationTurn], message: str,
                   history_limit: int = 0) -> List[Dict[str, str]]:
    """
    System instruction, then prior turns in order, then the new user turn.
    A positive history_limit keeps only the most recent turns.
    """
    if history_limit > 0:
        history = history[-history_limit:]

    messages = [{"role": "system", "content": build_system_prompt(region)}]
    messages.extend({"role": turn.role, "content": turn.content} for turn in history)
    messages.append({"role": "user", "content": message})
    return messages
