"""Gerador de código de barras e linha digitável de boletos (padrão FEBRABAN)."""
from .constantes import (
    BANCOS_BOLETO,
    CARTEIRAS_BB_VALIDADAS,
    CODIGO_MOEDA_REAL,
    DATA_BASE_FATOR_VENCIMENTO,
    FATOR_VENCIMENTO_MAXIMO,
)

from .erros import (
    ErroBoleto,
    CampoObrigatorioAusente,
    FormatoInvalido,
    ValorForaDoIntervalo,
    ErroIntegridadeLayout,
    BancoNaoSuportado,
)

from .base import (
    limpar_numero,
    zero_esquerda,
    modulo10,
    modulo11,
    modulo11_boleto,
    dv_codigo_banco,
    calcular_fator_vencimento,
    normalizar_valor,
    formatar_valor_codigo_barras,
)

from .modelos import (
    Endereco,
    Pessoa,
    ContaBancaria,
    Boleto,
)

from .codigo_barras import (
    montar_codigo_barras
)

from .linha_digitavel import (
    montar_linha_digitavel,
    formatar_linha_digitavel,
    linha_digitavel_para_codigo_barras,
    validar_linha_digitavel_boleto,
)

from .bancos import (
    CampoLivre,
    LayoutBanco,
    LAYOUTS_BANCOS,
    obter_layout,
    montar_campo_livre_bb,
    montar_campo_livre_itau,
    montar_campo_livre_bradesco,
    dv_nosso_numero_bradesco,
)

from .builder import (
    DadosBoleto,
    gerar_boleto,
    BoletoBuilder,
)

__all__ = [
    "BANCOS_BOLETO",
    "CARTEIRAS_BB_VALIDADAS",
    "CODIGO_MOEDA_REAL",
    "DATA_BASE_FATOR_VENCIMENTO",
    "FATOR_VENCIMENTO_MAXIMO",
    "ErroBoleto",
    "CampoObrigatorioAusente",
    "FormatoInvalido",
    "ValorForaDoIntervalo",
    "ErroIntegridadeLayout",
    "BancoNaoSuportado",
    "limpar_numero",
    "zero_esquerda",
    "modulo10",
    "modulo11",
    "modulo11_boleto",
    "dv_codigo_banco",
    "calcular_fator_vencimento",
    "normalizar_valor",
    "formatar_valor_codigo_barras",
    "Endereco",
    "Pessoa",
    "ContaBancaria",
    "Boleto",
    "montar_codigo_barras",
    "montar_linha_digitavel",
    "formatar_linha_digitavel",
    "linha_digitavel_para_codigo_barras",
    "validar_linha_digitavel_boleto",
    "CampoLivre",
    "LayoutBanco",
    "LAYOUTS_BANCOS",
    "obter_layout",
    "montar_campo_livre_bb",
    "montar_campo_livre_itau",
    "montar_campo_livre_bradesco",
    "dv_nosso_numero_bradesco",
    "DadosBoleto",
    "gerar_boleto",
    "BoletoBuilder",
]
