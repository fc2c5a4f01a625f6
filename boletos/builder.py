"""
Montagem do boleto a partir dos dados do título.

``DadosBoleto`` guarda a configuração completa (imutável); ``gerar_boleto``
é uma função pura dessa configuração para um ``Boleto`` pronto ou um erro.
``BoletoBuilder`` é a interface fluente por etapas (pagador, beneficiário,
banco, datas, valores, instruções): cada etapa devolve um novo builder,
então nenhum objeto parcialmente configurado é compartilhado.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

from .bancos import obter_layout
from .base import calcular_fator_vencimento, formatar_valor_codigo_barras, normalizar_valor
from .codigo_barras import montar_codigo_barras
from .constantes import CODIGO_MOEDA_REAL, DATA_BASE_FATOR_VENCIMENTO
from .erros import CampoObrigatorioAusente
from .linha_digitavel import montar_linha_digitavel
from .modelos import Boleto, Endereco, Pessoa

logger = logging.getLogger(__name__)

Valor = Union[Decimal, int, float, str]


@dataclass(frozen=True)
class DadosBoleto:
    codigo_banco: str
    pagador: Optional[Pessoa] = None
    beneficiario: Optional[Pessoa] = None
    agencia: Optional[str] = None
    conta: Optional[str] = None
    carteira: Optional[str] = None
    data_vencimento: Optional[date] = None
    data_documento: Optional[date] = None
    valor: Optional[Valor] = None
    numero_documento: Optional[str] = None
    nosso_numero: Optional[str] = None
    instrucoes: Optional[str] = None


def _como_data(valor):
    if isinstance(valor, datetime):
        return valor.date()
    return valor


def gerar_boleto(dados: DadosBoleto) -> Boleto:
    """
    Valida os dados, aplica o layout do banco e devolve o boleto completo.

    Falha com ``CampoObrigatorioAusente`` se faltar pagador, beneficiário,
    vencimento, valor ou nosso número (agência, conta e carteira também são
    exigidas por todos os layouts). Não existe resultado parcial.
    """
    layout = obter_layout(dados.codigo_banco)

    for campo in ("pagador", "beneficiario", "data_vencimento", "valor", "nosso_numero"):
        if getattr(dados, campo) is None:
            raise CampoObrigatorioAusente(campo)

    data_vencimento = _como_data(dados.data_vencimento)
    data_documento = _como_data(dados.data_documento) or date.today()
    valor = normalizar_valor(dados.valor)

    conta = layout.normalizar_conta(dados.agencia, dados.conta, dados.carteira)
    nosso_numero = layout.normalizar_nosso_numero(dados.nosso_numero)
    campo_livre, nosso_numero_formatado, avisos_layout = layout.montar_campo_livre(
        conta, nosso_numero
    )

    avisos = list(avisos_layout)
    fator = calcular_fator_vencimento(data_vencimento)
    if data_vencimento < DATA_BASE_FATOR_VENCIMENTO:
        avisos.append(
            f"Vencimento {data_vencimento.strftime('%d/%m/%Y')} anterior à data base "
            "do fator; fator de vencimento 0000."
        )

    codigo_barras = montar_codigo_barras(
        layout.codigo,
        CODIGO_MOEDA_REAL,
        fator,
        formatar_valor_codigo_barras(valor),
        campo_livre,
    )
    linha_digitavel = montar_linha_digitavel(codigo_barras)

    boleto = Boleto(
        pagador=dados.pagador,
        beneficiario=dados.beneficiario,
        conta=conta,
        valor=valor,
        data_vencimento=data_vencimento,
        data_documento=data_documento,
        numero_documento=dados.numero_documento or nosso_numero,
        nosso_numero=nosso_numero,
        nosso_numero_formatado=nosso_numero_formatado,
        codigo_barras=codigo_barras,
        linha_digitavel=linha_digitavel,
        instrucoes=dados.instrucoes,
        avisos=tuple(avisos),
    )
    logger.debug(
        "Boleto %s gerado: nosso número %s, linha %s",
        layout.codigo,
        nosso_numero_formatado,
        linha_digitavel,
    )
    return boleto


class BoletoBuilder:
    """
    Builder fluente de boletos para um banco.

        boleto = (
            BoletoBuilder("341")
            .com_pagador("Cliente Ltda", "11.222.333/0001-44")
            .com_beneficiario("Empresa S.A.", "11.111.111/0001-11")
            .com_banco("1565", "13877-4", "175")
            .com_datas(date(2011, 3, 9))
            .com_valores(Decimal("2952.95"), "DOC-1", "12345678")
            .build()
        )
    """

    def __init__(self, codigo_banco, dados: Optional[DadosBoleto] = None):
        layout = obter_layout(codigo_banco)
        self._dados = dados if dados is not None else DadosBoleto(codigo_banco=layout.codigo)

    @property
    def dados(self) -> DadosBoleto:
        return self._dados

    def _com(self, **alteracoes) -> "BoletoBuilder":
        return BoletoBuilder(self._dados.codigo_banco, replace(self._dados, **alteracoes))

    # Configura o pagador (sacado)
    def com_pagador(self, nome, documento="", logradouro="", bairro="", cep="", cidade="", uf=""):
        endereco = Endereco(logradouro, bairro, cep, cidade, uf)
        return self._com(pagador=Pessoa(nome, documento, endereco))

    # Configura o beneficiário (cedente)
    def com_beneficiario(self, nome, documento="", logradouro="", bairro="", cep="", cidade="", uf=""):
        endereco = Endereco(logradouro, bairro, cep, cidade, uf)
        return self._com(beneficiario=Pessoa(nome, documento, endereco))

    def com_banco(self, agencia, conta, carteira):
        return self._com(agencia=agencia, conta=conta, carteira=carteira)

    def com_datas(self, data_vencimento, data_documento=None):
        return self._com(data_vencimento=data_vencimento, data_documento=data_documento)

    def com_valores(self, valor, numero_documento, nosso_numero):
        return self._com(valor=valor, numero_documento=numero_documento, nosso_numero=nosso_numero)

    def com_instrucoes(self, instrucoes):
        return self._com(instrucoes=instrucoes)

    def build(self) -> Boleto:
        return gerar_boleto(self._dados)
