import argparse
import logging

from unmint.client import Client, Environment
from unmint.error import Error
from unmint.keys import load

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ap = argparse.ArgumentParser()
ap.add_argument('-s', '--sender', required=True, help='The base58-encoded secret of the sender account')
ap.add_argument('-d', '--destination', required=True, help='The public address of the destination account')
ap.add_argument('-a', '--amount', default='0.001', help='The amount of SOL to send')
ap.add_argument('--devnet', action='store_true', help='Send on devnet instead of mainnet')
args = vars(ap.parse_args())

client = Client(Environment.DEVNET if args['devnet'] else Environment.MAINNET)

try:
    tx_id = client.transfer_sol(load(args['sender']), args['destination'], args['amount'])
    logger.info(f'transaction successfully submitted with signature: {tx_id}')
except Error as e:
    logger.error(f'transfer failed: {repr(e)}')
