"""
Commande CLI listant les taches planifiees exposees a l'hote.
"""

from rich.table import Table

from src.adapters.cli.helpers import console
from src.services.user_data_tasks import SCHEDULED_TASKS


def tasks() -> None:
    """Liste les taches planifiees (cle, nom, categorie, options)."""
    table = Table(title="Taches planifiees")
    table.add_column("Cle", style="dim")
    table.add_column("Nom", style="bold cyan")
    table.add_column("Categorie")
    table.add_column("Sens")
    table.add_column("Options")
    table.add_column("Description")

    for task_cls in SCHEDULED_TASKS:
        flags = [
            "visible" if not task_cls.is_hidden else "masquee",
            "active" if task_cls.is_enabled else "inactive",
        ]
        if task_cls.is_logged:
            flags.append("journalisee")
        table.add_row(
            task_cls.key,
            task_cls.name,
            task_cls.category,
            task_cls.direction.name.lower(),
            ", ".join(flags),
            task_cls.description,
        )

    console.print(table)
