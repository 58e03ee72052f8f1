from pydantic import BaseModel


class LogTemplate(BaseModel):
    """A Mustache-style log statement template bound to one language"""
    language: str
    template: str
    model_config = {'frozen': True}
