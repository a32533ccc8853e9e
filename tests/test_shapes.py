from pydantic import BaseModel

from frontmatter_stream.core.scanner import ParserState
from frontmatter_stream.core.shapes import ShapeRegistry


class Post(BaseModel):
	title: str


class Page(BaseModel):
	slug: str


def test_registry_maps_discriminators():
	registry = ShapeRegistry({"post": Post})
	assert registry("post") is Post
	assert registry("page") is None
	assert "post" in registry
	assert len(registry) == 1


def test_register_directly_and_as_decorator():
	registry = ShapeRegistry()
	registry.register("post", Post)

	@registry.register("page")
	class Landing(BaseModel):
		slug: str

	assert registry("post") is Post
	assert registry("page") is Landing
	assert registry.discriminators == ["page", "post"]


def test_default_shape_for_unknown_discriminator():
	registry = ShapeRegistry({"post": Post}, default=Page)
	assert registry("anything") is Page


def test_registry_as_parser_factory():
	registry = ShapeRegistry({"post": Post, "page": Page})
	state = ParserState.from_pairs(factory=registry)
	state.parse(b"---\nfmtype: page\nslug: about\n---\n")
	assert state.typed_value() == Page(slug="about")
