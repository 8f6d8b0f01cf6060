import argparse
import asyncio
import os

from dotenv import load_dotenv

from predator_sdk import PredatorClient, DomainError


async def buy_tokens(client: PredatorClient):
    client.logger.info("Buying tokens...")
    result = await client.buy({
        "privateKeys": os.environ["PRIVATE_KEYS"],
        "tokenAddress": os.environ["TOKEN_ADDRESS"],
        "amount": os.environ["BUY_AMOUNT"],
    })
    client.logger.info(f"Buy successful: {result}")


async def sell_tokens(client: PredatorClient):
    client.logger.info("Selling tokens...")
    result = await client.sell({
        "privateKeys": os.environ["PRIVATE_KEYS"],
        "tokenAddress": os.environ["TOKEN_ADDRESS"],
        "percentage": os.environ["SELL_PERCENTAGE"],
    })
    client.logger.info(f"Sell successful: {result}")


async def create_token(client: PredatorClient):
    client.logger.info("Creating a new token...")
    result = await client.create({
        "privateKeys": os.environ["PRIVATE_KEYS"],
        "devPrivateKey": os.environ["DEV_PRIVATE_KEY"],
        "amount": os.environ["CREATE_AMOUNT"],
        "name": os.environ["TOKEN_NAME"],
        "symbol": os.environ["TOKEN_SYMBOL"],
        "description": os.environ.get("TOKEN_DESCRIPTION"),
        "telegram": os.environ.get("TOKEN_TELEGRAM"),
        "twitter": os.environ.get("TOKEN_TWITTER"),
        "website": os.environ.get("TOKEN_WEBSITE"),
        "file": os.environ.get("TOKEN_LOGO_URL"),
    })
    client.logger.info(f"Token creation successful: {result}")


STEPS = {"create": create_token, "buy": buy_tokens, "sell": sell_tokens}


async def main(steps):
    async with PredatorClient() as client:
        for step in steps:
            try:
                await STEPS[step](client)
            except DomainError as e:
                client.logger.error(f"{step} failed: {e}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Predator SDK example")
    parser.add_argument("steps", nargs="+", choices=list(STEPS), help="Operations to run, in order")
    args = parser.parse_args()

    load_dotenv()
    asyncio.run(main(args.steps))
