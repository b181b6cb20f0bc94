from app.schemas.common import CamelModel


class TrailheadOut(CamelModel):
    name: str
    latitude: float
    longitude: float
