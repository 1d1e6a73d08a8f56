from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Usuário retornado pela API (imutável).

    The wire format uses the API's own key names (``nombre``, ``rol``); the
    Python field names are accepted too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str = Field(alias="nombre")
    email: str
    role: str = Field(alias="rol")

    @property
    def initial(self) -> str:
        return self.name[:1].upper() or "?"

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
