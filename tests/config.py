import vedro


class Config(vedro.Config):
    DEV_COMPOSE = 'docker/compose.development.yaml'
    PROD_COMPOSE = 'docker/compose.production.yaml'
    HEALTH_HOST = '127.0.0.1'
