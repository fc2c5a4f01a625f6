"""Tabelas e constantes do padrão FEBRABAN usadas na geração de boletos."""

from datetime import date

BANCOS_BOLETO = {
    "001": "Banco do Brasil S.A.",
    "237": "Banco Bradesco S.A.",
    "341": "Banco Itaú S.A.",
}

# Real (R$)
CODIGO_MOEDA_REAL = "9"

# Dia zero do fator de vencimento. O fator de 4 dígitos esgota em 21/02/2025.
DATA_BASE_FATOR_VENCIMENTO = date(1997, 10, 7)
FATOR_VENCIMENTO_MAXIMO = 9999

TAMANHO_CODIGO_BARRAS = 44
TAMANHO_LINHA_DIGITAVEL = 47
TAMANHO_CAMPO_LIVRE = 25
TAMANHO_VALOR = 10
TAMANHO_FATOR = 4

# Carteiras conferidas para o layout de convênio de 6 dígitos do BB
CARTEIRAS_BB_VALIDADAS = {"11", "16", "18"}

# Caracteres de pontuação aceitos (e descartados) em agência, conta etc.
SEPARADORES_NUMERICOS = " .-/"
