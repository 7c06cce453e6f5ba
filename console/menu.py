"""
Interactive command menu for the blob console.
"""

import logging
from typing import Callable

from common.errors import GatewayError
from configuration import MENU_DELETE, MENU_DOWNLOAD, MENU_EXIT, MENU_LIST, MENU_UPLOAD
from gateway.storage_gateway import GatewayResult, StorageGateway

logger = logging.getLogger(__name__)

MENU_LINES = (
    "Select an option:",
    f"{MENU_LIST}. List Blobs",
    f"{MENU_UPLOAD}. Upload Blob",
    f"{MENU_DOWNLOAD}. Download Blob",
    f"{MENU_DELETE}. Delete Blob",
    f"{MENU_EXIT}. Exit",
)


class CommandMenu:
    """Reads operator choices and runs one gateway command at a time."""

    def __init__(
        self,
        gateway: StorageGateway,
        container: str,
        input_func: Callable[[], str] = input,
        output: Callable[[str], None] = print,
        overwrite_downloads: bool = False,
    ):
        self.gateway = gateway
        self.container = container
        self.input_func = input_func
        self.output = output
        self.overwrite_downloads = overwrite_downloads

        self._commands = {
            MENU_LIST: self.list_blobs,
            MENU_UPLOAD: self.upload_blob,
            MENU_DOWNLOAD: self.download_blob,
            MENU_DELETE: self.delete_blob,
        }

    def _prompt(self, text: str) -> str:
        self.output(text)
        return self.input_func()

    async def run(self) -> None:
        """Loop until the operator picks Exit or input ends."""
        while True:
            for line in MENU_LINES:
                self.output(line)

            choice = None
            try:
                choice = self.input_func()
                if choice == MENU_EXIT:
                    break
                command = self._commands.get(choice)
                if command is None:
                    self.output("Invalid option. Please try again.")
                    continue
                await command()
            except EOFError:
                break
            except Exception as e:
                # e.g. the operation log could not be written
                logger.error(f"Command {choice!r} failed: {e}", exc_info=True)
                self.output(f"An unexpected error occurred: {e}")

        self.output("Exiting program...")

    async def list_blobs(self) -> None:
        self.output("Listing blobs...")
        try:
            async for name in self.gateway.list_blobs(self.container):
                self.output(name)
        except GatewayError as e:
            self.output(f"Error listing blobs: {e}")

    async def upload_blob(self) -> None:
        file_path = self._prompt("Enter the file path to upload:")
        blob_name = self._prompt("Enter the blob name:")
        self.output("Uploading blob...")
        self._report(await self.gateway.upload(self.container, file_path, blob_name))

    async def download_blob(self) -> None:
        blob_name = self._prompt("Enter the blob name to download:")
        file_path = self._prompt("Enter the file path to save the downloaded blob:")
        self.output("Downloading blob...")
        result = await self.gateway.download(
            self.container, blob_name, file_path, overwrite=self.overwrite_downloads
        )
        self._report(result)

    async def delete_blob(self) -> None:
        blob_name = self._prompt("Enter the blob name to delete:")
        self.output("Deleting blob...")
        self._report(await self.gateway.delete(self.container, blob_name))

    def _report(self, result: GatewayResult) -> None:
        self.output(result.message)
