"""SQLAlchemy table definitions for pod people.

These match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# IDENTITIES TABLE (local and cached remote people)
# ============================================================================
identities_table = Table(
    "identities",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    # Always stored in canonical (trimmed, lowercase) form
    Column("account_identifier", String(255), nullable=False),
    Column("is_local", Boolean, nullable=False),
    Column("url", Text, nullable=True),
    Column("serialized_public_key", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Uniqueness of account identifiers is enforced here, not in application code
Index(
    "uq_identities_account_identifier",
    identities_table.c.account_identifier,
    unique=True,
)

# ============================================================================
# PROFILES TABLE (1:1 with identities, shares the identity's primary key)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column(
        "identity_id",
        UUID,
        ForeignKey("identities.id", ondelete="RESTRICT"),
        primary_key=True,
    ),
    Column("first_name", String(255), nullable=True),
    Column("last_name", String(255), nullable=True),
    Column("image_url", Text, nullable=True),
    Column("bio", Text, nullable=True),
)

Index("idx_profiles_first_name", profiles_table.c.first_name)
Index("idx_profiles_last_name", profiles_table.c.last_name)

# ============================================================================
# LOCAL USERS TABLE
# ============================================================================
local_users_table = Table(
    "local_users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False, unique=True),
    Column(
        "identity_id",
        UUID,
        ForeignKey("identities.id", ondelete="RESTRICT"),
        nullable=False,
        unique=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE (owned by identities)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id",
        UUID,
        ForeignKey("identities.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE (belong to posts; authorship is not a foreign key)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="RESTRICT"), nullable=False
    ),
    Column("author_id", UUID, nullable=False),
    Column("author_identifier", String(255), nullable=False),  # Denormalized
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# CONTACTS TABLE (local users' relationship edges)
# ============================================================================
contacts_table = Table(
    "contacts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id",
        UUID,
        ForeignKey("local_users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column(
        "identity_id",
        UUID,
        ForeignKey("identities.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("aspect", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "identity_id", name="uq_contact_user_identity"),
)

Index("idx_contacts_identity_id", contacts_table.c.identity_id)
