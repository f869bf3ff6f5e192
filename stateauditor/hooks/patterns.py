"""Pattern validator: is a binding pattern a conventional value + setter pair?"""

from stateauditor.config import DEFAULT_CONFIG, HookRuleConfig

from .models import BindingPattern, PatternKind, SlotKind, Verdict


def is_symmetric_pair(value_name: str, setter_name: str, config: HookRuleConfig = DEFAULT_CONFIG) -> bool:
    return setter_name == config.expected_setter(value_name)


def validate(pattern: BindingPattern, config: HookRuleConfig = DEFAULT_CONFIG) -> Verdict:
    """Classify a binding pattern.

    Order matters: a symmetric pair is valid before anything else is
    checked, and the specific lengths 0 and 1 win over the general
    "wrong length" case.
    """
    slots = pattern.slots

    if pattern.kind is PatternKind.POSITIONAL and len(slots) == 2:
        value, setter = slots
        if value.is_identifier and setter.is_identifier and is_symmetric_pair(value.name, setter.name, config):
            return Verdict.VALID

    if pattern.kind is not PatternKind.POSITIONAL:
        return Verdict.NOT_DESTRUCTURED

    if not slots:
        return Verdict.EMPTY

    if len(slots) == 1:
        return Verdict.VALUE_ONLY

    if len(slots) > 2 or any(slot.kind is SlotKind.OTHER for slot in slots[:2]):
        return Verdict.EXTRA_SLOTS

    return Verdict.MISNAMED


def value_name_for(pattern: BindingPattern, config: HookRuleConfig = DEFAULT_CONFIG) -> str | None:
    """Name a fix should anchor on.

    The first slot's identifier, or the name recovered from a
    conventionally named setter when the value slot is missing.
    """
    slots = pattern.slots
    if not slots:
        return None

    if slots[0].is_identifier:
        return slots[0].name

    if len(slots) >= 2 and slots[1].is_identifier:
        return config.value_from_setter(slots[1].name)

    return None
