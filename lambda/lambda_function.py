"""
Lambda entrypoint (handler configurado na função: lambda_function.lambda_handler)
Toda a lógica HTTP fica no adapter de entrada
"""
from infrastructure.adapters.input.lambda_handler import lambda_handler

__all__ = ['lambda_handler']
