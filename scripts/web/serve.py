import argparse
import uvicorn


# Create the parser
arg_parser = argparse.ArgumentParser(
    prog="python -m scripts.web.serve",
    description="Starts the web API with uvicorn"
)

# Add the arguments
arg_parser.add_argument(
    '--host',
    metavar='host',
    type=str,
    default="0.0.0.0",
    help='interface to bind to'
)

arg_parser.add_argument(
    '--port',
    metavar='port',
    type=int,
    default=8000,
    help='port to listen on'
)

arg_parser.add_argument(
    '--reload',
    action='store_true',
    help='restart on code changes (development only)'
)

# Execute the parse_args() method
args = arg_parser.parse_args()
uvicorn.run("web.main:app", host=args.host, port=args.port, reload=args.reload)
