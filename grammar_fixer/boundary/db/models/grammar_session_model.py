"""
Grammar fix session ORM model.

Represents one text-correction exchange: the text as submitted and the
best corrected version, owned by the user who created it.

Dependencies: sqlalchemy, grammar_fixer.boundary.db.base
System role: Session persistence for ownership-scoped correction storage
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from grammar_fixer.boundary.db.base import Base, IDMixin, TimestampMixin


class GrammarSessionModel(Base, IDMixin, TimestampMixin):
    """
    Grammar fix session ORM model.

    Only the owner may read or mutate a row. There is no history of prior
    corrections: corrected_text always holds the current best version.
    Rows are never deleted by the application.

    Attributes:
        id: Opaque text primary key (auto-generated)
        owner_id: Identity of the creating user (immutable)
        language: Optional short language tag, e.g. "en", "ta"
        original_text: Text as submitted (non-empty)
        corrected_text: Best corrected version (non-empty)
        overall_comment: Optional summary feedback
        issues: Issue annotations attached to this session
        created_at: Creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        issues: One-to-many with GrammarIssueModel (no cascade delete)
    """

    __tablename__ = "grammar_fix_sessions"

    owner_id: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        index=True,
        doc="Identity of the user who created the session",
    )

    language: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        doc="Optional language tag",
    )

    original_text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Text as submitted",
    )

    corrected_text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Best corrected version",
    )

    overall_comment: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        doc="Summary feedback (e.g. 'clear, minor issues')",
    )

    # Relationships
    issues = relationship(
        "GrammarIssueModel",
        back_populates="session",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<GrammarSessionModel(id={self.id}, owner_id='{self.owner_id}')>"
