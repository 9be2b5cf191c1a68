"""initial_schema

Create the people schema:
- Identities (local and cached remote people, unique account identifiers)
- Profiles (1:1 with identities)
- Local users (accounts hosted on this pod)
- Posts and comments (content owned by identities)
- Contacts (local users' relationship edges)

Revision ID: 3c1d7f0a9b52
Revises:
Create Date: 2026-10-18 10:12:44.318502

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1d7f0a9b52"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("NOW()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # IDENTITIES table
    # ========================================================================
    op.create_table(
        "identities",
        _id_column(),
        sa.Column("account_identifier", sa.String(length=255), nullable=False),
        sa.Column("is_local", sa.Boolean(), nullable=False),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("serialized_public_key", sa.Text(), nullable=True),
        _created_at_column(),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_identities_account_identifier",
        "identities",
        ["account_identifier"],
        unique=True,
    )

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("identity_id", sa.UUID(), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=True),
        sa.Column("last_name", sa.String(length=255), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["identity_id"], ["identities.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("identity_id"),
    )
    op.create_index("idx_profiles_first_name", "profiles", ["first_name"])
    op.create_index("idx_profiles_last_name", "profiles", ["last_name"])

    # ========================================================================
    # LOCAL USERS table
    # ========================================================================
    op.create_table(
        "local_users",
        _id_column(),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("identity_id", sa.UUID(), nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(
            ["identity_id"], ["identities.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("identity_id"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        _id_column(),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(
            ["author_id"], ["identities.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_identifier", sa.String(length=255), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])

    # ========================================================================
    # CONTACTS table
    # ========================================================================
    op.create_table(
        "contacts",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("identity_id", sa.UUID(), nullable=False),
        sa.Column("aspect", sa.String(length=255), nullable=True),
        _created_at_column(),
        sa.ForeignKeyConstraint(
            ["user_id"], ["local_users.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(
            ["identity_id"], ["identities.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "identity_id", name="uq_contact_user_identity"
        ),
    )
    op.create_index("idx_contacts_identity_id", "contacts", ["identity_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_contacts_identity_id", table_name="contacts")
    op.drop_table("contacts")
    op.drop_index("idx_comments_author_id", table_name="comments")
    op.drop_index("idx_comments_post_id", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_posts_author_id", table_name="posts")
    op.drop_table("posts")
    op.drop_table("local_users")
    op.drop_index("idx_profiles_last_name", table_name="profiles")
    op.drop_index("idx_profiles_first_name", table_name="profiles")
    op.drop_table("profiles")
    op.drop_index("uq_identities_account_identifier", table_name="identities")
    op.drop_table("identities")
