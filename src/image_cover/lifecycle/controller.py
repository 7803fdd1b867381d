"""Image lifecycle controller for one record type.

This module coordinates capturing an upload, saving it with its watermark
and thumbnails, moving it when its derived directory changes, and removing
it with the record, while keeping the record attributes in sync with the
files on disk.
"""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger

from image_cover.core.bridge.attribute_bridge import AttributeAccessor, AttributeBridge
from image_cover.core.infrastructure.imaging.pillow_image_codec import PillowImageCodec
from image_cover.core.infrastructure.local.local_file_system import LocalFileSystem
from image_cover.core.infrastructure.local.upload_binder import MappingUploadBinder
from image_cover.core.models.config import CoverConfig
from image_cover.core.models.state import LifecycleState
from image_cover.core.repositories.file_system import FileSystem
from image_cover.core.repositories.image_codec import ImageCodec
from image_cover.core.repositories.upload_binder import Submission, UploadBinder
from image_cover.core.resolvers.path_resolver import PathResolver, normalize_directory
from image_cover.core.utils.decorators import lifecycle_phase
from image_cover.lifecycle.hooks import RecordLifecycleHooks
from image_cover.lifecycle.services.augment_service import AugmentService
from image_cover.lifecycle.services.delete_service import DeleteService
from image_cover.lifecycle.services.move_service import MoveService
from image_cover.lifecycle.services.save_service import SaveService

logger = Logger(UTC=True)


class CoverController(RecordLifecycleHooks):
    """File lifecycle state machine for a record's image.

    One controller is configured per record type and handles one
    operation at a time:

    - load_image: capture the upload bound to the relation attribute
    - save_image: write the original, watermark and thumbnails
    - update_path_and_save_image: replace on a new upload, or move when a
      derived directory changed
    - delete_image: remove the original and its thumbnails
    """

    def __init__(
        self,
        config: CoverConfig,
        *,
        binder: UploadBinder | None = None,
        codec: ImageCodec | None = None,
        file_system: FileSystem | None = None,
        accessors: Mapping[str, AttributeAccessor] | None = None,
        mapping_records: bool = False,
    ) -> None:
        """Wire the controller with its collaborators.

        Args:
            config: Validated configuration
            binder: Looks up incoming uploads
            codec: Image codec, Pillow by default
            file_system: Filesystem primitives, local disk by default
            accessors: Attribute accessor map; plain object attributes by default
            mapping_records: Records are dict-like, read and written by key

        Raises:
            ConfigurationError: If an accessor for a configured attribute is missing
        """
        self.config = config
        self.binder = binder or MappingUploadBinder()
        self.codec = codec or PillowImageCodec()
        self.file_system = file_system or LocalFileSystem()

        self.resolver = PathResolver(config)
        if accessors is not None:
            self.bridge = AttributeBridge(config, self.resolver, accessors)
        elif mapping_records:
            self.bridge = AttributeBridge.for_mapping(config, self.resolver)
        else:
            self.bridge = AttributeBridge.for_attributes(config, self.resolver)

        self.saver = SaveService(
            file_system=self.file_system,
            bridge=self.bridge,
            resolver=self.resolver,
        )
        self.augmenter = AugmentService(
            codec=self.codec,
            thumbnails=config.thumbnails,
            watermark=config.watermark,
        )
        self.mover = MoveService(
            file_system=self.file_system,
            bridge=self.bridge,
            thumbnails=config.thumbnails,
        )
        self.deleter = DeleteService(
            config=config,
            file_system=self.file_system,
            bridge=self.bridge,
        )

        self.state = LifecycleState.IDLE
        self._submission: Submission | None = None

    @classmethod
    def from_options(
        cls,
        *,
        binder: UploadBinder | None = None,
        codec: ImageCodec | None = None,
        file_system: FileSystem | None = None,
        accessors: Mapping[str, AttributeAccessor] | None = None,
        mapping_records: bool = False,
        **options: Any,
    ) -> "CoverController":
        """Build the configuration from raw options and the controller from it."""
        return cls(
            CoverConfig.create(**options),
            binder=binder,
            codec=codec,
            file_system=file_system,
            accessors=accessors,
            mapping_records=mapping_records,
        )

    @property
    def submission(self) -> Submission | None:
        return self._submission

    def finish_operation(self) -> None:
        self.resolver.reset()

    # ------------------------------------------------------------------
    # Relation attribute
    # ------------------------------------------------------------------

    def get_relation(self, record: Any) -> Any:
        """Captured upload, or the stored file reference when none is captured."""
        if self._submission is not None:
            return self._submission
        return self.bridge.read(record, self.config.model_attribute)

    def set_relation(self, record: Any, value: Any) -> None:
        self._submission = value if isinstance(value, Submission) else None

    @property
    def relation_accessors(self) -> dict[str, AttributeAccessor]:
        """Accessor map for the virtual relation attribute."""
        return {
            self.config.relation_attribute: AttributeAccessor(
                get=self.get_relation,
                set=self.set_relation,
            )
        }

    # ------------------------------------------------------------------
    # Lifecycle phases
    # ------------------------------------------------------------------

    @lifecycle_phase(LifecycleState.LOADING)
    def load_image(self, record: Any) -> bool:
        """Capture the upload sent for the relation attribute, if any."""
        if self.config.simple_request:
            self._submission = self.binder.get_instance_by_name(self.config.relation_attribute)
        else:
            self._submission = self.binder.get_instance(record, self.config.relation_attribute)

        logger.debug(
            "Upload captured" if self._submission else "No upload submitted",
            extra={"relation_attribute": self.config.relation_attribute},
        )
        return True

    @lifecycle_phase(LifecycleState.SAVING)
    def save_image(self, record: Any) -> bool:
        """Persist the captured upload. No-op when nothing was captured."""
        return self._save(record)

    @lifecycle_phase(LifecycleState.LOADING)
    def update_path_and_save_image(self, record: Any) -> bool:
        """Replace the image on a new upload, or follow a changed directory.

        Returns:
            False only when a required move failed
        """
        if self._submission is not None:
            self.state = LifecycleState.REPLACING
            self.deleter.delete(record)
            return self._save(record)

        if not self.config.is_dynamic_path or not self.bridge.has_stored_file(record):
            return True

        current_path = self.bridge.model_file_path(record)
        if not current_path:
            logger.debug("Stored directory unknown, nothing to move")
            return True

        current_path = normalize_directory(current_path)
        new_path = self.resolver.file_path(None, record)
        if current_path == new_path:
            return True

        self.state = LifecycleState.MOVING
        return self.mover.move(record, current_path, new_path)

    @lifecycle_phase(LifecycleState.DELETING)
    def delete_image(self, record: Any) -> None:
        """Remove the stored original and all its thumbnails."""
        self.deleter.delete(record)

    def _save(self, record: Any) -> bool:
        submission = self._submission
        if submission is None:
            return True

        file_path, file_name = self.saver.save(record, submission)
        self._submission = None

        self.augmenter.add_watermark(f"{file_path}{file_name}")
        self.augmenter.generate_thumbnails(file_path, file_name)
        return True

    # ------------------------------------------------------------------
    # RecordLifecycleHooks
    # ------------------------------------------------------------------

    def before_validate(self, record: Any) -> bool:
        return self.load_image(record)

    def before_insert(self, record: Any) -> bool:
        return self.save_image(record)

    def before_update(self, record: Any) -> bool:
        return self.update_path_and_save_image(record)

    def after_delete(self, record: Any) -> None:
        self.delete_image(record)
