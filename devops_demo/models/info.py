# devops_demo/models/info.py

from typing import List

from pydantic import BaseModel


class InfoResponse(BaseModel):
    app: str
    environment: str
    features: List[str]
