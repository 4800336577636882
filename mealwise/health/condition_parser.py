"""Free-text detection of health conditions."""
import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from mealwise.data_layer.condition_lexicon import (
    CONDITION_SYNONYMS,
    HEALTH_CONDITIONS,
)
from mealwise.data_layer.models import ConditionCategory, HealthCondition

logger = logging.getLogger(__name__)

# Advice per condition category, emitted in this order
CATEGORY_ADVICE: Tuple[Tuple[ConditionCategory, str], ...] = (
    (
        ConditionCategory.CARDIOVASCULAR,
        "Focus on low-sodium, potassium-rich foods to support heart health",
    ),
    (
        ConditionCategory.METABOLIC,
        "Choose complex carbs and high-fiber foods for better blood sugar control",
    ),
    (
        ConditionCategory.INFLAMMATORY,
        "Include anti-inflammatory foods like omega-3 rich fish and colorful vegetables",
    ),
)

WEIGHT_LOSS_ADVICE = "Prioritize lean proteins and vegetables to support healthy weight management"


def parse_conditions(
    text: str,
    conditions: Optional[Mapping[str, HealthCondition]] = None,
    synonyms: Optional[Mapping[str, Sequence[str]]] = None,
) -> List[str]:
    """Detect the health conditions mentioned in free-form text.

    Keys whose own text appears in the input are reported first, in lexicon
    order. Conditions mentioned only through an alternate phrase
    ("hypertension", "gout") follow in synonym-table order. Matching is
    plain case-insensitive substring containment.

    Args:
        text: Free-form user text
        conditions: Condition lexicon (defaults to HEALTH_CONDITIONS)
        synonyms: Alternate phrases per key (defaults to CONDITION_SYNONYMS)

    Returns:
        Condition keys without duplicates; empty when nothing matches
    """
    conditions = HEALTH_CONDITIONS if conditions is None else conditions
    synonyms = CONDITION_SYNONYMS if synonyms is None else synonyms
    lower_text = (text or "").lower()

    found: List[str] = [key for key in conditions if key in lower_text]

    for key, phrases in synonyms.items():
        if key in found or key not in conditions:
            continue
        if any(phrase in lower_text for phrase in phrases):
            found.append(key)

    logger.debug("Detected conditions %s", found)
    return found


def generate_health_advice(condition_keys: Sequence[str]) -> List[str]:
    """Build general dietary advice for a set of conditions.

    Args:
        condition_keys: Canonical condition keys; unknown keys are ignored

    Returns:
        Advice sentences, one per affected category, then weight-loss advice
    """
    categories = {
        HEALTH_CONDITIONS[key].category for key in condition_keys if key in HEALTH_CONDITIONS
    }

    advice = [message for category, message in CATEGORY_ADVICE if category in categories]
    if "weight loss" in condition_keys:
        advice.append(WEIGHT_LOSS_ADVICE)
    return advice
