"""
Hierarquia de exceções do gerador de boletos.

Toda falha da geração tem uma classe própria, com os dados do problema em
atributos (além da mensagem), para que quem chama possa tratar por tipo:

    ErroBoleto
    +-- CampoObrigatorioAusente
    +-- FormatoInvalido
    +-- ValorForaDoIntervalo
    +-- ErroIntegridadeLayout
    +-- BancoNaoSuportado

Nenhum erro é corrigido silenciosamente nem repetido: a geração do boleto
falha inteira na chamada que encontrou o problema.
"""


class ErroBoleto(Exception):
    """Base de todos os erros do gerador."""

    codigo = "ERRO_BOLETO"


class CampoObrigatorioAusente(ErroBoleto):
    """Um dado obrigatório não foi informado antes do build()."""

    codigo = "CAMPO_OBRIGATORIO_AUSENTE"

    def __init__(self, campo: str):
        self.campo = campo
        super().__init__(f"Campo obrigatório não informado: {campo}.")


class FormatoInvalido(ErroBoleto, ValueError):
    """Caracteres não numéricos (ou tamanho excedido) onde só cabem dígitos."""

    codigo = "FORMATO_INVALIDO"

    def __init__(self, campo: str, valor, motivo: str = "deve conter apenas dígitos"):
        self.campo = campo
        self.valor = valor
        super().__init__(f"{campo} inválido ({valor!r}): {motivo}.")


class ValorForaDoIntervalo(ErroBoleto, ValueError):
    """Valor negativo, vencimento além da janela do fator etc."""

    codigo = "VALOR_FORA_DO_INTERVALO"

    def __init__(self, campo: str, valor, motivo: str):
        self.campo = campo
        self.valor = valor
        super().__init__(f"{campo} fora do intervalo ({valor}): {motivo}.")


class ErroIntegridadeLayout(ErroBoleto):
    """
    Uma etapa interna de montagem produziu um campo com tamanho errado.

    Indica defeito (dados que escaparam da normalização ou erro de layout),
    nunca uma entrada de usuário a ser corrigida.
    """

    codigo = "ERRO_INTEGRIDADE_LAYOUT"

    def __init__(self, campo: str, esperado: int, obtido: int):
        self.campo = campo
        self.esperado = esperado
        self.obtido = obtido
        super().__init__(
            f"Erro interno ao montar {campo}: tamanho {obtido}, esperado {esperado}."
        )


class BancoNaoSuportado(ErroBoleto, ValueError):
    codigo = "BANCO_NAO_SUPORTADO"

    def __init__(self, codigo_banco):
        self.codigo_banco = codigo_banco
        super().__init__(f"Banco '{codigo_banco}' não possui layout de boleto neste gerador.")
