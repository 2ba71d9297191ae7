import logging
from typing import Dict, Optional

from googleapiclient.discovery import build

from erc_sheets.utils.google_auth import load_credentials

logger = logging.getLogger(__name__)


class GoogleDriveService:
    """Service for copying ERC workbooks in Google Drive."""

    def __init__(self, service=None):
        if service is None:
            service = build('drive', 'v3', credentials=load_credentials())
        self.service = service

    def copy_template(self, template_id: str, name: str, parent_id: Optional[str] = None) -> Dict[str, str]:
        """Copy the template workbook and return the new file's id and link."""
        file_metadata = {'name': name}
        if parent_id:
            file_metadata['parents'] = [parent_id]

        try:
            file = self.service.files().copy(
                fileId=template_id,
                body=file_metadata,
                fields='id, webViewLink'
            ).execute()
        except Exception as e:
            logger.error(f"Error copying template {template_id}: {str(e)}")
            raise

        logger.info(f"Copied template to: {name} with ID: {file.get('id')}")
        return {
            'id': file.get('id'),
            'web_view_link': file.get('webViewLink')
        }
