"""Ponto de entrada de linha de comando do gerador de boletos.

Este arquivo reexporta toda a API pública definida no pacote ``boletos``
e permite rodar ``python gerador_boleto.py``.
"""

from boletos import *  # noqa: F401,F403
from boletos import __all__ as _BOLETOS_ALL
from boletos.cli import main

__all__ = list(_BOLETOS_ALL) + ["main"]


if __name__ == "__main__":
    main()
