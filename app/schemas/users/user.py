from pydantic import BaseModel, ConfigDict


class PublicUserSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    email: str
