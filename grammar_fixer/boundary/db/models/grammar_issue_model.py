"""
Grammar issue ORM model.

One localized annotation attached to a grammar fix session.

Dependencies: sqlalchemy, grammar_fixer.boundary.db.base
System role: Issue persistence (create and list only)
"""

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from grammar_fixer.boundary.db.base import Base, CreatedAtMixin, IDMixin


class GrammarIssueModel(Base, IDMixin, CreatedAtMixin):
    """
    Grammar issue ORM model.

    Issues carry no owner of their own; access is always checked through
    the parent session. Rows are immutable once written.

    Attributes:
        id: Opaque text primary key (auto-generated)
        session_id: Parent GrammarSessionModel id
        issue_type: Informal category ("spelling", "grammar", "style", "punctuation")
        original_fragment: Fragment of the original text
        corrected_fragment: Replacement fragment
        explanation: Human-friendly rationale
        severity: Informal severity ("minor", "moderate", "major")
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "grammar_issues"

    session_id: Mapped[str] = mapped_column(
        ForeignKey("grammar_fix_sessions.id"),
        nullable=False,
        index=True,
        doc="Parent session ID",
    )

    issue_type: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    original_fragment: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    corrected_fragment: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    explanation: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    severity: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    # Relationships
    session = relationship(
        "GrammarSessionModel",
        back_populates="issues",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<GrammarIssueModel(id={self.id}, session_id='{self.session_id}')>"
