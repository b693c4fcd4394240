"""schema initial resto : client, plat, menu, commande

Revision ID: 3b7e2c91d4a0
Revises:
Create Date: 2026-10-17 09:12:44.318201

"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3b7e2c91d4a0"
down_revision = None
branch_labels = None
depends_on = None


def _colonnes_horodatage() -> list[sa.Column]:
    return [
        sa.Column("cree_le", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("mis_a_jour_le", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "client",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("nom", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("mot_de_passe_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("adresse", sa.String(length=500), nullable=True),
        *_colonnes_horodatage(),
    )
    op.create_index("ix_client_email", "client", ["email"], unique=True)

    op.create_table(
        "plat",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("nom", sa.String(length=200), nullable=False),
        sa.Column("prix", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("categorie", sa.String(length=100), nullable=True),
        sa.Column("allergenes", sa.JSON(), nullable=False),
        sa.Column("disponible", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_colonnes_horodatage(),
    )

    op.create_table(
        "menu",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("nom", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("prix", sa.Float(), nullable=False),
        *_colonnes_horodatage(),
    )

    op.create_table(
        "menu_plat",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("menu_id", sa.String(length=36), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("plat_id", sa.String(length=36), nullable=False),
        *_colonnes_horodatage(),
        sa.ForeignKeyConstraint(["menu_id"], ["menu.id"], name="fk_menu_plat_menu_id_menu", ondelete="CASCADE"),
    )
    op.create_index("ix_menu_plat_menu_id", "menu_plat", ["menu_id"], unique=False)
    op.create_index("ix_menu_plat_plat_id", "menu_plat", ["plat_id"], unique=False)

    op.create_table(
        "commande",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("date", sa.String(length=50), nullable=True),
        sa.Column("statut", sa.String(length=20), nullable=False),
        sa.Column("client_id", sa.String(length=36), nullable=True),
        sa.Column("prix_total", sa.Float(), nullable=False),
        *_colonnes_horodatage(),
        sa.ForeignKeyConstraint(
            ["client_id"], ["client.id"], name="fk_commande_client_id_client", ondelete="SET NULL"
        ),
    )
    op.create_index("ix_commande_client_id", "commande", ["client_id"], unique=False)

    op.create_table(
        "commande_plat",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("commande_id", sa.String(length=36), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("plat_id", sa.String(length=36), nullable=False),
        *_colonnes_horodatage(),
        sa.ForeignKeyConstraint(
            ["commande_id"], ["commande.id"], name="fk_commande_plat_commande_id_commande", ondelete="CASCADE"
        ),
    )
    op.create_index("ix_commande_plat_commande_id", "commande_plat", ["commande_id"], unique=False)
    op.create_index("ix_commande_plat_plat_id", "commande_plat", ["plat_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_commande_plat_plat_id", table_name="commande_plat")
    op.drop_index("ix_commande_plat_commande_id", table_name="commande_plat")
    op.drop_table("commande_plat")

    op.drop_index("ix_commande_client_id", table_name="commande")
    op.drop_table("commande")

    op.drop_index("ix_menu_plat_plat_id", table_name="menu_plat")
    op.drop_index("ix_menu_plat_menu_id", table_name="menu_plat")
    op.drop_table("menu_plat")

    op.drop_table("menu")
    op.drop_table("plat")

    op.drop_index("ix_client_email", table_name="client")
    op.drop_table("client")
