import jsonschema

from .schema_loader import load_schema
from .schemas.document_v1 import document_to_dict


def validate_document_contract(data: dict) -> None:
    """Validate a Document dict against the canonical Document.v1.json contract.

    Raises jsonschema.ValidationError if non-conformant.
    """
    jsonschema.validate(data, load_schema("Document.v1.json"))


def validate_document_model(document) -> None:
    """Project a Document model to JSON and validate it against the contract.

    Raises jsonschema.ValidationError if the projected artifact is non-conformant.
    """
    validate_document_contract(document_to_dict(document))
