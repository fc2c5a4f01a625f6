"""Utilitario de linha de comando para o gerador de boletos."""

import logging
from datetime import datetime

from .base import limpar_numero
from .builder import BoletoBuilder
from .constantes import BANCOS_BOLETO
from .erros import ErroBoleto
from .linha_digitavel import formatar_linha_digitavel, validar_linha_digitavel_boleto

SEPARADOR = "-" * 82


def _formatar_reais(valor) -> str:
    txt = f"{valor:,.2f}"
    return txt.replace(",", "X").replace(".", ",").replace("X", ".")


def _ler_data(texto):
    return datetime.strptime(texto.strip(), "%d/%m/%Y").date()


def imprimir_boleto(boleto):
    conta = boleto.conta
    print(SEPARADOR)
    print(f"Banco: {conta.nome_banco} ({conta.numero_banco_formatado})")
    print(f"Beneficiário: {boleto.beneficiario.nome} - {boleto.beneficiario.documento_formatado}")
    print(f"Endereço Beneficiário: {boleto.beneficiario.endereco}")
    print(SEPARADOR)
    print(f"Pagador: {boleto.pagador.nome} - {boleto.pagador.documento_formatado}")
    print(f"Endereço Pagador: {boleto.pagador.endereco}")
    print(SEPARADOR)
    print(f"Data Vencimento: {boleto.data_vencimento.strftime('%d/%m/%Y')}")
    print(f"Data Documento: {boleto.data_documento.strftime('%d/%m/%Y')}")
    print(f"Agência/Código Beneficiário: {conta.agencia_conta}")
    print(f"Carteira: {conta.carteira}")
    print(f"Nosso Número: {boleto.nosso_numero_formatado}")
    print(f"Número Documento: {boleto.numero_documento}")
    print(f"Valor Documento: R$ {_formatar_reais(boleto.valor)}")
    if boleto.instrucoes:
        print(f"Instruções: {boleto.instrucoes}")
    print(SEPARADOR)
    print(f"Linha Digitável: {boleto.linha_digitavel_formatada}")
    print(f"Código de Barras: {boleto.codigo_barras}")
    print(SEPARADOR)
    if boleto.avisos:
        print("Avisos:")
        for aviso in boleto.avisos:
            print("   -", aviso)


def gerar_boleto_interativo():
    print("Bancos disponíveis: " + ", ".join(f"{c} - {n}" for c, n in sorted(BANCOS_BOLETO.items())))
    codigo_banco = input("Código do banco: ").strip()
    agencia = input("Agência: ").strip()
    conta = input("Conta: ").strip()
    carteira = input("Carteira: ").strip()
    nosso_numero = input("Nosso Número (sem DV): ").strip()
    numero_documento = input("Número do documento (opcional): ").strip() or None
    valor = input("Valor (ex.: 199.99): ").strip().replace(",", ".")
    vencimento_txt = input("Vencimento (DD/MM/AAAA): ")
    pagador = input("Nome do pagador: ").strip()
    documento_pagador = input("CPF/CNPJ do pagador: ").strip()
    beneficiario = input("Nome do beneficiário: ").strip()
    documento_beneficiario = input("CPF/CNPJ do beneficiário: ").strip()
    instrucoes = input("Instruções (opcional): ").strip() or None

    try:
        vencimento = _ler_data(vencimento_txt)
    except ValueError:
        print(f"Erro: data de vencimento '{vencimento_txt.strip()}' inválida.")
        return None

    try:
        boleto = (
            BoletoBuilder(codigo_banco)
            .com_pagador(pagador, documento_pagador)
            .com_beneficiario(beneficiario, documento_beneficiario)
            .com_banco(agencia, conta, carteira)
            .com_datas(vencimento)
            .com_valores(valor, numero_documento, nosso_numero)
            .com_instrucoes(instrucoes)
            .build()
        )
    except ErroBoleto as exc:
        print(f"Erro: {exc}")
        return None

    print("\nOK. Boleto gerado.")
    imprimir_boleto(boleto)
    return boleto


def conferir_linha_digitavel_interativo():
    linha = input("Informe a linha digitável: ")
    erros, infos = validar_linha_digitavel_boleto(linha)

    if erros:
        print("Problemas na linha digitável:")
        for erro in erros:
            print("   -", erro)
    else:
        print("OK. Todos os dígitos verificadores conferem.")

    if infos:
        print("\n=== Dados extraídos ===")
        print(f"Banco: {infos['banco']} - {infos['nome_banco']}")
        print(f"Código de barras: {infos['codigo_barras']}")
        if infos["vencimento"]:
            print("Vencimento:", infos["vencimento"].strftime("%d/%m/%Y"))
        else:
            print("Vencimento: sem data de vencimento (fator 0000)")
        print(f"Valor: R$ {_formatar_reais(infos['valor'])}")
        if not erros:
            print("Linha formatada:", formatar_linha_digitavel(limpar_numero(linha)))
    return erros, infos


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    print("=== Gerador de boletos (código de barras e linha digitável) ===")
    print("1 - Gerar boleto")
    print("2 - Conferir linha digitável")
    opcao = input("Opção: ").strip()

    if opcao == "1":
        gerar_boleto_interativo()
    elif opcao == "2":
        conferir_linha_digitavel_interativo()
    else:
        print(f"Erro: opção '{opcao}' inválida.")


if __name__ == "__main__":
    main()
