import os

from hausaufgaben import create_app

app = create_app()

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 3000))
    app.logger.info("Server läuft auf Port %s", port)
    app.logger.info("📚 Erweiterte Hausaufgaben-API bereit!")
    app.run(host='0.0.0.0', port=port, debug=os.environ.get('FLASK_DEBUG') == '1')
