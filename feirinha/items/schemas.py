from feirinha.schemas import CamelModel


class ItemCreate(CamelModel):
    title: str


class ItemOut(CamelModel):
    id: int
    title: str
