#!/usr/bin/env python3
"""
Entry point for the posts subgraph: serve the API or issue development tokens.
"""

import argparse
import logging
from datetime import timedelta
from typing import List, Optional

from src.auth.identity import create_token
from src.utils.config import config

logger = logging.getLogger(__name__)


def serve(host: Optional[str] = None, port: Optional[int] = None):
    """Run the FastAPI app under uvicorn"""
    import uvicorn

    from backend.fastapi_app import app

    host = host or config.web_host
    port = port or config.web_port
    logger.info("Post service running at http://%s:%s/graphql", host, port)
    uvicorn.run(app, host=host, port=port)


def issue_token(user_id: int, expires_minutes: Optional[int] = None) -> str:
    """Sign a token for the given user with the configured secret"""
    minutes = expires_minutes if expires_minutes is not None else config.token_expire_minutes
    expires = timedelta(minutes=minutes) if minutes > 0 else None
    return create_token(user_id, config.jwt_secret, config.jwt_algorithm, expires)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Federated GraphQL subgraph for posts'
    )
    subparsers = parser.add_subparsers(dest='command')

    serve_parser = subparsers.add_parser('serve', help='Start the HTTP server')
    serve_parser.add_argument('--host', type=str, help='Bind address (defaults to web.host)')
    serve_parser.add_argument('--port', type=int, help='Port (defaults to web.port)')

    token_parser = subparsers.add_parser('issue-token', help='Print a signed bearer token')
    token_parser.add_argument('--user-id', type=int, required=True, help='Value of the userId claim')
    token_parser.add_argument(
        '--expires-minutes',
        type=int,
        help='Token lifetime; 0 issues a token without expiry'
    )

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'serve':
        serve(args.host, args.port)
    elif args.command == 'issue-token':
        print(issue_token(args.user_id, args.expires_minutes))
    else:
        parser.print_help()


if __name__ == '__main__':
    main()
