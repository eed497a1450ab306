# devops_demo/models/system.py

from datetime import datetime

from pydantic import BaseModel


class HomeResponse(BaseModel):
    message: str
    version: str
    status: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
