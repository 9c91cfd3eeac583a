from pydantic import BaseModel, ConfigDict
from typing import Any, Dict

class SchemaBase(BaseModel):
    """
    Base class for all report schemas in the content validation engine.
    Enforces strict fields and serializes with the camelCase wire names.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ContentModelBase(BaseModel):
    """
    Base class for typed views over author-submitted content.

    Authors may add fields the runtime does not know yet, so extras are kept
    rather than rejected. Numeric ids are accepted as strings.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)
