"""Initial schema - users, teams, dashboards/folders and their permissions.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("login", sa.String(190), nullable=False),
        sa.Column("email", sa.String(190), nullable=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("org_id", sa.BigInteger(), nullable=False),
        sa.Column("org_role", sa.String(20), nullable=False, server_default="Viewer"),
        sa.Column("is_server_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.CheckConstraint("org_role IN ('Viewer', 'Editor', 'Admin')", name="ck_app_user_org_role"),
    )
    op.create_index("ix_app_user_login", "app_user", ["login"], unique=True)

    op.create_table(
        "team",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("org_id", sa.BigInteger(), nullable=False),
        sa.Column("name", sa.String(190), nullable=False),
        sa.Column("email", sa.String(190), nullable=True),
    )
    op.create_index("ix_team_org_name", "team", ["org_id", "name"], unique=True)

    op.create_table(
        "team_member",
        sa.Column("team_id", sa.BigInteger(), sa.ForeignKey("team.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("user_id", sa.BigInteger(), sa.ForeignKey("app_user.id", ondelete="CASCADE"), primary_key=True),
    )

    op.create_table(
        "resource",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("org_id", sa.BigInteger(), nullable=False),
        sa.Column("uid", sa.String(40), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("is_folder", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("folder_id", sa.BigInteger(), sa.ForeignKey("resource.id", ondelete="SET NULL"), nullable=True),
    )
    op.create_index("ix_resource_org_uid", "resource", ["org_id", "uid"], unique=True)

    op.create_table(
        "resource_permission",
        sa.Column("id", sa.BigInteger(), sa.Identity(), primary_key=True),
        sa.Column("resource_id", sa.BigInteger(), sa.ForeignKey("resource.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("team_id", sa.BigInteger(), nullable=False, server_default="0"),
        # '' when the subject is a user or team
        sa.Column("role", sa.String(20), nullable=False, server_default=""),
        sa.Column("permission", sa.SmallInteger(), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("permission IN (1, 2, 4)", name="ck_resource_permission_level"),
    )
    op.create_index(
        "ix_resource_permission_subject",
        "resource_permission",
        ["resource_id", "user_id", "team_id", "role"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_table("resource_permission")
    op.drop_table("resource")
    op.drop_table("team_member")
    op.drop_table("team")
    op.drop_table("app_user")
