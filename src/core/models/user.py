from pydantic import BaseModel, ConfigDict, Field

from core.models.fields import Scalar, TruthyScalar


class CreateUserRequest(BaseModel):
    name: TruthyScalar
    email: TruthyScalar


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId")
    name: Scalar
    email: Scalar
