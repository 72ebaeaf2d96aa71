from constantes.constantes import OPERATIONAL_STATUS

def _is_status_operational(status: str | None) -> bool:
    '''
    Informa se o status de um trecho permite o uso da via.

    Parâmetros
    ----------
    status : str | None (ausente = trecho utilizável)

    Retorno
    -------
    bool : True se ausente ou igual a "o" (sem diferenciar maiúsculas)
    '''

    if status is None:
        return True
    return str(status).lower() == OPERATIONAL_STATUS
