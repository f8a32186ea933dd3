from pydantic import BaseModel, ConfigDict


class BaseGolfModel(BaseModel):
    """Persisted round and hole records; edits are re-validated on assignment."""
    model_config = ConfigDict(validate_assignment=True)
