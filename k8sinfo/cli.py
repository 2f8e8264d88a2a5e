"""
k8sinfo server
Entry point that parses flags and serves the API with uvicorn.
"""

import argparse
import logging
import uvicorn
from k8sinfo.core.config import load_settings
from k8sinfo.main import create_app

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Serve Kubernetes cluster topology and host metrics over HTTP"
    )
    parser.add_argument("--kubeconfig", help="path to kubeconfig file (default: ~/.kube/config)")
    parser.add_argument("--port", type=int, help="port to run the server on (default: 8080)")
    parser.add_argument("--host", help="address to bind (default: 0.0.0.0)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: INFO)"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main execution function."""
    args = parse_args(argv)
    settings = load_settings(
        kubeconfig_path=args.kubeconfig,
        port=args.port,
        host=args.host,
        log_level=args.log_level,
    )
    
    # Configure logging
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    logger.info(f"Using kubeconfig {settings.kubeconfig_path}")
    
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
