from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from gentlepol.domain.feeds.entities import FeedDefinition, Selectors


class SelectorsDTO(BaseModel):
    model_config = ConfigDict(extra="forbid")

    post: str | None = None
    title: str | None = None
    link: str
    description: str | None = None
    date: str | None = None
    image: str | None = None

    def to_domain(self) -> Selectors:
        return Selectors(**self.model_dump())

    @classmethod
    def from_domain(cls, selectors: Selectors) -> SelectorsDTO:
        return cls(
            post=selectors.post,
            title=selectors.title,
            link=selectors.link,
            description=selectors.description,
            date=selectors.date,
            image=selectors.image,
        )


class FeedDTO(BaseModel):
    url: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=256)
    selectors: SelectorsDTO

    def to_domain(self) -> FeedDefinition:
        return FeedDefinition(name=self.name, url=self.url, selectors=self.selectors.to_domain())

    @classmethod
    def from_domain(cls, definition: FeedDefinition) -> FeedDTO:
        return cls(
            url=definition.url,
            name=definition.name,
            selectors=SelectorsDTO.from_domain(definition.selectors),
        )


class FeedUpdateDTO(BaseModel):
    """Same body as creation; ``name`` may be sent but is ignored."""

    url: str = Field(min_length=1)
    name: str | None = None
    selectors: SelectorsDTO

    def to_domain(self, name: str) -> FeedDefinition:
        return FeedDefinition(name=name, url=self.url, selectors=self.selectors.to_domain())


class FeedNamesDTO(BaseModel):
    items: list[str]


class OkDTO(BaseModel):
    ok: bool = True
