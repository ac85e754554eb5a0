from pydantic import BaseModel


class WebhookRequest(BaseModel):
    name: str
    regNo: str
    email: str

    @classmethod
    def from_settings(cls, settings) -> "WebhookRequest":
        return cls(
            name=settings.CANDIDATE_NAME,
            regNo=settings.CANDIDATE_REG_NO,
            email=settings.CANDIDATE_EMAIL,
        )


class WebhookResponse(BaseModel):
    webhook: str
    accessToken: str


class SolutionRequest(BaseModel):
    finalQuery: str
