import logging

from unmint.keys import generate

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

wallet = generate()

# The secret is only shown once; store it before discarding the output.
logger.info(f'address: {wallet.address}')
logger.info(f'secret: {wallet.secret}')
