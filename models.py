from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from exercises.config import FillSentenceConfig


class MomentType(str, Enum):
    TEXT_BOX = "textruta"
    SPEECH_BUBBLE = "pratbubbla"
    FILL_SENTENCE = "fyll-mening"


# ============================================================================
# Moment configurations
# ============================================================================


class TextBoxConfig(BaseModel):
    """Plain text shown to the student with a single continue button."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = ""
    button_text: str = Field(
        default="Nästa", validation_alias=AliasChoices("button_text", "buttonText")
    )


class BubbleItem(BaseModel):
    """One line spoken by the guide character."""

    id: str
    type: str = "text"
    order: int = 0
    content: str = ""


class SpeechBubbleConfig(BaseModel):
    """A character speaking a sequence of bubbles."""

    model_config = ConfigDict(populate_by_name=True)

    character_image: str = Field(
        default="",
        validation_alias=AliasChoices("character_image", "characterImage"),
    )
    animation_speed: int = Field(
        default=50,
        ge=0,
        validation_alias=AliasChoices("animation_speed", "animationSpeed"),
    )
    items: list[BubbleItem] = Field(default_factory=list)

    def ordered_items(self) -> list[BubbleItem]:
        return sorted(self.items, key=lambda item: item.order)


# ============================================================================
# Moments
# ============================================================================


class BaseMoment(BaseModel):
    id: str
    title: str = ""


class TextBoxMoment(BaseMoment):
    type: Literal[MomentType.TEXT_BOX] = MomentType.TEXT_BOX
    config: TextBoxConfig = Field(default_factory=TextBoxConfig)


class SpeechBubbleMoment(BaseMoment):
    type: Literal[MomentType.SPEECH_BUBBLE] = MomentType.SPEECH_BUBBLE
    config: SpeechBubbleConfig = Field(default_factory=SpeechBubbleConfig)


class FillSentenceMoment(BaseMoment):
    type: Literal[MomentType.FILL_SENTENCE] = MomentType.FILL_SENTENCE
    config: FillSentenceConfig = Field(default_factory=FillSentenceConfig)


Moment = Annotated[
    Union[TextBoxMoment, SpeechBubbleMoment, FillSentenceMoment],
    Field(discriminator="type"),
]


class Lesson(BaseModel):
    """An ordered sequence of lesson moments for one word class."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = ""
    word_class: str = Field(
        default="", validation_alias=AliasChoices("word_class", "wordClass")
    )
    moments: list[Moment] = Field(default_factory=list)
