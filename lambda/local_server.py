#!/usr/bin/env python3
"""
Servidor Local para Desenvolvimento
Simula AWS Lambda + API Gateway localmente usando Flask

Como usar:
    cd lambda
    OPENWEATHER_API_KEY=... python local_server.py

Endpoints disponíveis:
    GET  http://localhost:8000/api/cities/suggestions?q=mar&limit=5
    GET  http://localhost:8000/api/cities/search?q=Maricá
    GET  http://localhost:8000/api/weather?lat=-22.91&lon=-42.82
    GET  http://localhost:8000/api/weather/search?q=Maricá
"""
import os
import sys
import json
from flask import Flask, request, jsonify
from flask_cors import CORS
from datetime import datetime

# Garantir que o diretório lambda está no path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from lambda_function import lambda_handler

API_ROUTES = [
    '/api/cities/suggestions',
    '/api/cities/search',
    '/api/weather',
    '/api/weather/search',
]

app = Flask(__name__)
CORS(app, resources={r"/api/*": {"origins": os.environ.get('CORS_ORIGIN', '*')}})


class MockLambdaContext:
    """Mock do contexto Lambda para execução local"""
    def __init__(self):
        self.aws_request_id = f"local-{datetime.now().timestamp()}"
        self.function_name = "local-weather-search"
        self.function_version = "$LATEST"
        self.invoked_function_arn = "arn:aws:lambda:local:000000000000:function:local-weather-search"
        self.memory_limit_in_mb = "256"
        self.log_group_name = "/aws/lambda/local-weather-search"
        self.log_stream_name = "local"

    def get_remaining_time_in_millis(self):
        return 30000


def flask_to_lambda_event(flask_request):
    """Converte requisição Flask para evento Lambda/API Gateway"""
    query_string_parameters = dict(flask_request.args.items())
    now = datetime.now()

    return {
        'resource': flask_request.path,
        'path': flask_request.path,
        'httpMethod': flask_request.method,
        'headers': dict(flask_request.headers.items()),
        'queryStringParameters': query_string_parameters or None,
        'body': None,
        'isBase64Encoded': False,
        'requestContext': {
            'accountId': '000000000000',
            'apiId': 'local',
            'protocol': 'HTTP/1.1',
            'httpMethod': flask_request.method,
            'path': flask_request.path,
            'stage': 'local',
            'requestId': f"local-{now.timestamp()}",
            'requestTime': now.isoformat(),
            'requestTimeEpoch': int(now.timestamp() * 1000),
            'identity': {
                'sourceIp': flask_request.remote_addr,
                'userAgent': flask_request.headers.get('User-Agent', '')
            }
        }
    }


def lambda_to_flask_response(lambda_response):
    """Converte resposta Lambda para resposta Flask"""
    status_code = lambda_response.get('statusCode', 200)
    headers = lambda_response.get('headers') or {}
    body = lambda_response.get('body', '')

    try:
        body_dict = json.loads(body) if isinstance(body, str) else body
        return jsonify(body_dict), status_code, headers
    except (json.JSONDecodeError, TypeError):
        return body, status_code, headers


def proxy_to_lambda():
    """Encaminha a requisição Flask para o lambda_handler"""
    if request.method == 'OPTIONS':
        return '', 200

    event = flask_to_lambda_event(request)
    response = lambda_handler(event, MockLambdaContext())
    return lambda_to_flask_response(response)


for route in API_ROUTES:
    app.add_url_rule(
        route,
        endpoint=route,
        view_func=proxy_to_lambda,
        methods=['GET', 'OPTIONS']
    )


@app.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': 'weather-search-local',
        'timestamp': datetime.now().isoformat()
    })


@app.errorhandler(404)
def not_found(error):
    """Handler para rotas não encontradas"""
    return jsonify({
        'error': 'Not Found',
        'message': f"Route {request.path} not found",
        'available_routes': [f"GET {route}" for route in API_ROUTES] + ['GET /health']
    }), 404


if __name__ == '__main__':
    if not os.environ.get('OPENWEATHER_API_KEY'):
        print("⚠️  AVISO: OPENWEATHER_API_KEY não definida, as rotas de clima e busca retornarão erro\n")

    port = int(os.environ.get('PORT', 8000))
    host = os.environ.get('HOST', '0.0.0.0')

    print("=" * 70)
    print("🚀 Servidor Local - Weather Search API")
    print("=" * 70)
    print(f"\n📍 Rodando em: http://{host}:{port}")
    print("\n📋 Endpoints disponíveis:")
    for route in API_ROUTES:
        print(f"   • GET  http://localhost:{port}{route}")
    print(f"   • GET  http://localhost:{port}/health")
    print("\n" + "=" * 70 + "\n")

    app.run(host=host, port=port, debug=True, use_reloader=True)
