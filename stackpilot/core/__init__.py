"""
Core of stackpilot.

Resolves which compose file an invocation acts on (dev or prod), reads database
credentials and the gateway port from the project `.env` file, and relays each
command to docker compose, npm or the MongoDB client inside the stack.

All commands are one of such relays:
> docker compose -f %compose_file% up|down|build|restart|logs|ps %service%
> docker compose -f %compose_file% exec %service% /bin/sh
> docker compose -f %compose_file% exec mongodb mongosh|mongodump ...
> npm install|run %script%

The command table lives in commands, the relays in dispatcher.
"""
