"""
Ponto de Entrada da Aplicação (Runner)

Este script importa a "Application Factory" (create_app) do pacote
'painel_docente' e inicia o servidor local do Flask.

Para executar o servidor:
(Com o ambiente virtual .venv ativo e o .env preenchido)
$ python run.py
"""

from painel_docente import create_app

# Cria a instância da aplicação usando a factory
app = create_app()

if __name__ == "__main__":
    # Uso local de um único professor: escuta apenas em 127.0.0.1.
    app.run(host='127.0.0.1', port=5000, debug=app.config['DEBUG'])
