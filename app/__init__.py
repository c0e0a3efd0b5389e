"""Pacote webapp para o encaminhamento de alertas do Grafana -> Google Chat.

Este pacote contém:
- constants: variáveis de ambiente, cores e ForwarderSettings
- errors: erros terminais do processamento de um alerta
- models: modelo do alerta de entrada e do card de saída
- utils: (de)serialização JSON e helpers de formatação
- formatters: cor, menção e montagem do card
- services: integração com o webhook do Google Chat
- controller: criação do Flask app e endpoints
"""
