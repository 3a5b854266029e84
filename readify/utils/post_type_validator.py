import enum
from dataclasses import dataclass
from typing import Optional

from pydantic import HttpUrl, TypeAdapter, ValidationError

from readify.core.errors import EmptySubmission, InvalidPostType


class PostType(str, enum.Enum):
    TEXT = "Text"
    LINK = "Link"
    IMAGE = "Image"


SUBMISSION_FIELDS = {
    PostType.TEXT: "text_submission",
    PostType.LINK: "link_submission",
    PostType.IMAGE: "image_submission",
}

_http_url = TypeAdapter(HttpUrl)


@dataclass(frozen=True)
class Submission:
    """The one normalized payload a post carries for its declared type."""

    post_type: PostType
    value: str

    @property
    def field_name(self) -> str:
        return SUBMISSION_FIELDS[self.post_type]

    def as_fields(self) -> dict:
        return {self.field_name: self.value}


def validate_submission(
    post_type: str,
    text_submission: Optional[str] = None,
    link_submission: Optional[str] = None,
    image_submission: Optional[str] = None,
) -> Submission:
    """Pick and normalize the submission matching `post_type`.

    Fields belonging to the other two types are ignored. Image data is passed
    through untouched for the uploader.

    Raises:
        InvalidPostType: unknown type, or a link that is not an http(s) URL.
        EmptySubmission: the field for the declared type is missing or blank.
    """
    try:
        kind = PostType(post_type)
    except ValueError:
        raise InvalidPostType(
            "Invalid post type. Must be one of: Text, Link, Image."
        ) from None

    candidates = {
        PostType.TEXT: text_submission,
        PostType.LINK: link_submission,
        PostType.IMAGE: image_submission,
    }
    value = candidates[kind]
    if value is None or not value.strip():
        raise EmptySubmission(f"{kind.value} submission must not be empty.")

    if kind is PostType.IMAGE:
        return Submission(post_type=kind, value=value)

    value = value.strip()
    if kind is PostType.LINK:
        try:
            _http_url.validate_python(value)
        except ValidationError:
            raise InvalidPostType("Valid URL needed for Link submission.") from None

    return Submission(post_type=kind, value=value)
