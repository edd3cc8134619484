"""
Restaurante - exercícios de padrões GoF em torno de um pedido
"""
__version__ = "1.0.0"
