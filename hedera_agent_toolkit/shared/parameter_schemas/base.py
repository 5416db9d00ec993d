from pydantic import BaseModel, ConfigDict


class BaseModelWithArbitraryTypes(BaseModel):
    """Base for schemas holding SDK objects (AccountId, PublicKey, TokenParams...)."""

    model_config = ConfigDict(arbitrary_types_allowed=True)
