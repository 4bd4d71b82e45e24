"""
Example entities used by the test suite.

Entities do not need a base class beyond the declarative Base. Setter
methods are optional; they are used where a table cell needs converting.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from beentity.core.comparison import parse_bool
from beentity.core.database import Base


class ExampleEntity(Base):
    """Entity with explicit getters and setters"""

    __tablename__ = "example_entities"

    id = Column(Integer, primary_key=True)
    foo_field = Column(String(100), unique=True, nullable=False)
    bar_field = Column(String(100), nullable=True)

    def set_foo_field(self, foo_field):
        self.foo_field = foo_field

    def get_foo_field(self):
        return self.foo_field

    def set_bar_field(self, bar_field):
        self.bar_field = bar_field

    def get_bar_field(self):
        return self.bar_field


class Dummy(Base):
    """Entity relying on plain attributes except for the boolean"""

    __tablename__ = "dummies"

    id = Column(Integer, primary_key=True)
    title = Column(String(100), unique=True, nullable=False)
    active = Column(Boolean, nullable=False, default=True)
    custom = Column(String(100), nullable=True)
    position = Column(Integer, nullable=True)

    def set_active(self, value):
        if isinstance(value, str):
            parsed = parse_bool(value)
            if parsed is None:
                raise ValueError(f"'{value}' is not a boolean")
            value = parsed
        self.active = value

    def set_position(self, value):
        self.position = int(value) if value not in (None, "") else None

    def __repr__(self):
        return f"<Dummy(id={self.id}, title='{self.title}')>"


class Author(Base):
    """Author model"""

    __tablename__ = "authors"

    id = Column(Integer, primary_key=True)
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(100), nullable=True)

    posts = relationship("Post", back_populates="author")


class Post(Base):
    """Post model, always owned by an author"""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), unique=True, nullable=False)
    author_id = Column(Integer, ForeignKey("authors.id", ondelete="CASCADE"), nullable=False)

    author = relationship("Author", back_populates="posts")

    def get_author(self):
        return self.author.email if self.author else None
