from pydantic import Field

from app.schemas.common import CamelModel, UrlStr


class MediaUrlRequest(CamelModel):
    url: UrlStr


class GenerateRequest(CamelModel):
    url: UrlStr
    stream: bool = True


class ScrapedPage(CamelModel):
    url: str
    title: str = ""
    description: str = ""
    markdown: str = ""


class GeneratedContent(CamelModel):
    tagline: str = Field(
        ...,
        description="A compelling tagline (max 60 char) that captures the tool's unique value proposition. "
                    "Avoid tool name, focus on benefits."
    )
    description: str = Field(
        ...,
        description="A concise meta description (max 160 chars) highlighting key features and benefits. "
                    "Use active voice, and avoid tool name"
    )
    content: str = Field(
        ...,
        description="A detailed and engaging longer description with key benefits (up to 1000 chars). "
                    "Should be markdown formatted, should start with paragraph, and not use headings. "
                    "Highlight important points with bold text. Make sure the lists use correct Markdown "
                    "syntax and are properly formatted. End with a brief conclusion paragraph."
    )
