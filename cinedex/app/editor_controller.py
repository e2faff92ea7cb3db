"""Title editor: opens the add/edit dialog and applies in-memory catalog edits."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..domain.entities import Content, ContentDraft, ContentType, content_key
from ..domain.ports import UseCaseError
from ..usecases.edit_content import DeleteContent, SaveContent
from ..viewmodels.edit_content_vm import EditContentVM
from .data_manager import DataManager
from .event_bus import CATALOG_CHANGED, AppEventBus, CatalogChange

AlertFn = Callable[[str, str], None]


class EditorController:
    def __init__(
        self,
        *,
        data_manager: DataManager,
        event_bus: AppEventBus,
        open_edit_dialog: Callable[[EditContentVM], Any],
        show_error: AlertFn,
        set_status: Callable[[str], None],
        confirm: Callable[[str, str], bool],
        open_details: Optional[Callable[[Content], Any]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.data_manager = data_manager
        self.event_bus = event_bus
        self._open_edit_dialog = open_edit_dialog
        self._show_error = show_error
        self._set_status = set_status
        self._confirm = confirm
        self.open_details = open_details
        self.active: Optional[EditContentVM] = None

    def open_new(self, content_type: ContentType = ContentType.MOVIE) -> Optional[EditContentVM]:
        if not self.data_manager.is_data_loaded():
            self._show_error("Edit Error", "Load the catalog before adding titles.")
            return None
        return self._open(EditContentVM(content_type=content_type))

    def open_edit(self, content: Content) -> EditContentVM:
        return self._open(EditContentVM.for_content(content))

    def save(self, draft: ContentDraft, key: Optional[str] = None) -> Optional[Content]:
        previous = self.data_manager.find_content(key) if key else None
        previous_title = previous.title if previous is not None else ""
        try:
            saved = SaveContent(self.data_manager, current_year=self.data_manager.current_year)(draft, key)
        except UseCaseError as err:
            self._fail("Edit Error", err)
            return None
        self.active = None
        self.event_bus.publish(
            CATALOG_CHANGED, CatalogChange(key=content_key(saved), content=saved, previous_title=previous_title)
        )
        self._set_status(f"{'Added' if previous is None else 'Updated'} '{saved.title}'")
        if self.open_details is not None:
            self.open_details(saved)
        return saved

    def delete(self, key: str) -> bool:
        item = self.data_manager.find_content(key)
        name = item.title if item is not None else key
        if not self._confirm("Delete Title", f"Remove '{name}' with its rating and watchlist entry?"):
            return False
        try:
            removed = DeleteContent(self.data_manager)(key)
        except UseCaseError as err:
            self._fail("Edit Error", err)
            return False
        self.active = None
        self.event_bus.publish(CATALOG_CHANGED, CatalogChange(key=key, content=None, previous_title=removed.title))
        self._set_status(f"Deleted '{removed.title}'")
        return True

    def _open(self, vm: EditContentVM) -> EditContentVM:
        vm.on_save = self.save
        vm.on_delete = self.delete
        self.active = vm
        self._open_edit_dialog(vm)
        return vm

    def _fail(self, title: str, err: UseCaseError) -> None:
        self._log.error("%s [%s]: %s", title, err.code, err.message)
        self._show_error(title, err.message)


__all__ = ["EditorController"]
