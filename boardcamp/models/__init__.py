# Modelos do banco de dados

# Importar todos os modelos para garantir que os relacionamentos funcionem
from .category import Category
from .game import Game
from .customer import Customer
from .rental import Rental

# Exportar todos os modelos
__all__ = ["Category", "Game", "Customer", "Rental"]
