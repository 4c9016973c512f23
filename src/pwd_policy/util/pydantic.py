import pydantic
import pydantic_core

__all__ = ("convert_errors", "format_errors")


CUSTOM_TYPES = {
    "model_type": "mapping_type",
    "model_attributes_type": "mapping_type",
    "dict_type": "mapping_type",
    "list_type": "sequence_type",
    "frozen_set_type": "sequence_type",
    "enum": "enum_value_out_of_range",
    "extra_forbidden": "extra_field",
}
CUSTOM_MESSAGES = {
    # https://docs.pydantic.dev/latest/errors/validation_errors/
    "extra_field": "Extra fields not allowed",
    "mapping_type": "Input must be a valid mapping",
    "sequence_type": "Input must be a valid sequence",
    "enum_value_out_of_range": (
        "Input must be set to one of the following values: {expected}"
    ),
}


def convert_errors(
    ex: pydantic.ValidationError,
    custom_messages: dict[str, str] = CUSTOM_MESSAGES,
    custom_types: dict[str, str] = CUSTOM_TYPES,
) -> list[pydantic_core.ErrorDetails]:
    new_errors: list[pydantic_core.ErrorDetails] = []

    for error in ex.errors(include_url=False):
        ctx = error.get("ctx")

        if custom_type := custom_types.get(error["type"]):
            error["type"] = custom_type

        if custom_message := custom_messages.get(error["type"]):
            error["msg"] = custom_message.format(**ctx) if ctx else custom_message

        if ctx:
            # we don't want to show the context to the user
            del error["ctx"]

        new_errors.append(error)

    return new_errors


def format_errors(errors: list[pydantic_core.ErrorDetails]) -> str:
    lines = []
    for error in errors:
        loc = ".".join(str(part) for part in error["loc"]) or "<root>"
        lines.append("%s: %s" % (loc, error["msg"]))
    return "\n".join(lines)
