"""Modelos imutáveis consumidos e produzidos pelo gerador de boletos."""

import re
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional, Tuple

from .base import dv_codigo_banco, limpar_numero
from .constantes import TAMANHO_CODIGO_BARRAS, TAMANHO_LINHA_DIGITAVEL
from .erros import CampoObrigatorioAusente, ErroIntegridadeLayout, ValorForaDoIntervalo
from .linha_digitavel import formatar_linha_digitavel

_RE_CODIGO_BARRAS = re.compile(r"^[0-9]{44}$")
_RE_LINHA_DIGITAVEL = re.compile(r"^[0-9]{47}$")


def _fmt_cpf(d: str) -> str:
    return f"{d[0:3]}.{d[3:6]}.{d[6:9]}-{d[9:11]}"


def _fmt_cnpj(d: str) -> str:
    return f"{d[0:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:14]}"


@dataclass(frozen=True)
class Endereco:
    logradouro: str = ""
    bairro: str = ""
    cep: str = ""
    cidade: str = ""
    uf: str = ""

    def __str__(self):
        return f"{self.logradouro}, {self.bairro} - CEP: {self.cep} - {self.cidade}/{self.uf}"


@dataclass(frozen=True)
class Pessoa:
    """Pagador ou beneficiário. Apenas descritivo: o nome é o único dado exigido."""

    nome: str
    documento: str = ""
    endereco: Endereco = field(default_factory=Endereco)

    def __post_init__(self):
        if not (self.nome or "").strip():
            raise CampoObrigatorioAusente("nome")

    @property
    def documento_formatado(self) -> str:
        """CPF (11 dígitos) ou CNPJ (14 dígitos) com máscara; outro conteúdo volta como veio."""
        d = limpar_numero(self.documento)
        if len(d) == 11:
            return _fmt_cpf(d)
        if len(d) == 14:
            return _fmt_cnpj(d)
        return self.documento or ""


@dataclass(frozen=True)
class ContaBancaria:
    """
    Dados bancários do beneficiário, já normalizados para o layout do banco
    (agência, conta e carteira com zeros à esquerda no tamanho exigido).
    """

    codigo_banco: str
    nome_banco: str
    agencia: str
    conta: str
    carteira: str
    conta_dv: str = ""

    @property
    def numero_banco_formatado(self) -> str:
        return f"{self.codigo_banco}-{dv_codigo_banco(self.codigo_banco)}"

    @property
    def agencia_conta(self) -> str:
        if self.conta_dv:
            return f"{self.agencia} / {self.conta}-{self.conta_dv}"
        return f"{self.agencia} / {self.conta}"


@dataclass(frozen=True)
class Boleto:
    """
    Boleto pronto. Só é criado por ``gerar_boleto``/``BoletoBuilder.build``
    e não muda depois disso.
    """

    pagador: Pessoa
    beneficiario: Pessoa
    conta: ContaBancaria
    valor: Decimal
    data_vencimento: date
    data_documento: date
    numero_documento: str
    nosso_numero: str
    nosso_numero_formatado: str
    codigo_barras: str
    linha_digitavel: str
    instrucoes: Optional[str] = None
    avisos: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.data_vencimento is None:
            raise CampoObrigatorioAusente("data_vencimento")
        if self.valor is None or self.valor < 0:
            raise ValorForaDoIntervalo("valor", self.valor, "não pode ser negativo")
        if not _RE_CODIGO_BARRAS.match(self.codigo_barras or ""):
            raise ErroIntegridadeLayout(
                "código de barras", TAMANHO_CODIGO_BARRAS, len(self.codigo_barras or "")
            )
        if not _RE_LINHA_DIGITAVEL.match(self.linha_digitavel or ""):
            raise ErroIntegridadeLayout(
                "linha digitável", TAMANHO_LINHA_DIGITAVEL, len(self.linha_digitavel or "")
            )

    @property
    def dv_geral(self) -> str:
        return self.codigo_barras[4]

    @property
    def fator_vencimento(self) -> str:
        return self.codigo_barras[5:9]

    @property
    def campo_livre(self) -> str:
        return self.codigo_barras[19:]

    @property
    def linha_digitavel_formatada(self) -> str:
        return formatar_linha_digitavel(self.linha_digitavel)
