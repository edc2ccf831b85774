"""Create admin tables

Revision ID: 001
Revises: None
Create Date: 2025-03-02 00:00:00.000000+00:00

What:  Creates address, church, industries and fields_of_work, and seeds the
       two lookup tables with their default translation keys.
How:   PostgreSQL-specific: gen_random_uuid() ids, SMALLINT identity lookup ids,
       INSERT ... ON CONFLICT (key) DO NOTHING for the seeds.

Rollback: downgrade() drops all four tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


DEFAULT_INDUSTRIES = [
    "industry.technology",
    "industry.healthcare",
    "industry.finance",
    "industry.education",
    "industry.retail",
    "industry.manufacturing",
    "industry.construction",
    "industry.hospitality",
    "industry.transportation",
    "industry.real_estate",
    "industry.agriculture",
    "industry.media_entertainment",
    "industry.telecommunications",
    "industry.energy",
    "industry.food_beverage",
    "industry.professional_services",
    "industry.nonprofit",
    "industry.government",
    "industry.other",
]

# Occupation groups, as translation keys
DEFAULT_FIELDS_OF_WORK = [
    "field_of_work.architecture_engineering",
    "field_of_work.arts_design_entertainment_media",
    "field_of_work.building_grounds_maintenance",
    "field_of_work.business_financial_operations",
    "field_of_work.community_social_services",
    "field_of_work.computer_mathematical",
    "field_of_work.construction_extraction",
    "field_of_work.education_training_library",
    "field_of_work.farming_fishing_forestry",
    "field_of_work.food_preparation_serving",
    "field_of_work.healthcare_practitioners",
    "field_of_work.healthcare_support",
    "field_of_work.installation_maintenance_repair",
    "field_of_work.legal",
    "field_of_work.life_physical_social_science",
    "field_of_work.management",
    "field_of_work.military",
    "field_of_work.office_administrative_support",
    "field_of_work.personal_care_service",
    "field_of_work.production",
    "field_of_work.protective_service",
    "field_of_work.sales",
    "field_of_work.other",
]


def _create_lookup_table(name: str) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.SmallInteger(), sa.Identity(always=False), nullable=False),
        sa.Column("key", sa.String(100), nullable=False, comment="Translation key"),
        sa.PrimaryKeyConstraint("id", name=f"pk_{name}"),
        sa.UniqueConstraint("key", name=f"uq_{name}_key"),
    )


def _seed(name: str, keys) -> None:
    table = sa.table(name, sa.column("key", sa.String))
    stmt = postgresql.insert(table).values([{"key": k} for k in keys])
    op.execute(stmt.on_conflict_do_nothing(index_elements=["key"]))


def upgrade() -> None:
    op.create_table(
        "address",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("street_line_1", sa.String(255), nullable=False),
        sa.Column("street_line_2", sa.String(255), nullable=True, comment="NULL when absent"),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("state_province", sa.String(100), nullable=False),
        sa.Column("postal_code", sa.String(20), nullable=False),
        sa.Column("country", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_address"),
    )

    op.create_table(
        "church",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("diocese", sa.String(255), nullable=False),
        sa.Column("parish_number", sa.String(50), nullable=True),
        sa.Column("website_url", sa.String(255), nullable=True),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("address_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("is_archdiocese", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.PrimaryKeyConstraint("id", name="pk_church"),
        sa.UniqueConstraint("name", name="uq_church_name"),
        # An address outlives the churches that point at it, and cannot be
        # deleted while one does
        sa.ForeignKeyConstraint(
            ["address_id"], ["address.id"], name="fk_address", ondelete="RESTRICT"
        ),
    )
    op.create_index("idx_church_diocese", "church", ["diocese"])

    _create_lookup_table("industries")
    _create_lookup_table("fields_of_work")

    _seed("industries", DEFAULT_INDUSTRIES)
    _seed("fields_of_work", DEFAULT_FIELDS_OF_WORK)


def downgrade() -> None:
    op.drop_table("fields_of_work")
    op.drop_table("industries")
    op.drop_index("idx_church_diocese", table_name="church")
    op.drop_table("church")
    op.drop_table("address")
