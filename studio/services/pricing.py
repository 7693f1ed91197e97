"""
Pricing Packages

Packages are listed with their ordered features nested under ``features``.
Features belong to a package and are removed by the database when the
package is deleted.
"""

import logging

from studio.errors import NotFound, guarded
from studio.extensions import db
from studio.models import PackageFeature, PricingPackage
from studio.schemas import PackageFeatureInput, PricingPackageInput, validate_input
from studio.services.repository import ResourceConfig, ResourceRepository

logger = logging.getLogger(__name__)


class PricingRepository(ResourceRepository):

    def features_for(self, package_id):
        with guarded(f'loading features of package {package_id}'):
            return (PackageFeature.query
                    .filter_by(package_id=package_id)
                    .order_by(PackageFeature.display_order.asc(), PackageFeature.id.asc())
                    .all())

    def add_feature(self, package_id, data):
        """Attach a feature; the parent's updated_at is left alone."""
        if self.get(package_id) is None:
            raise NotFound('Pricing package not found.')
        values = validate_input(PackageFeatureInput, data).model_dump()
        feature = PackageFeature(package_id=package_id, **values)
        with guarded(f'adding feature to package {package_id}'):
            db.session.add(feature)
            db.session.commit()
        return feature

    def delete_feature(self, feature_id):
        with guarded(f'deleting package feature {feature_id}'):
            result = db.session.execute(db.delete(PackageFeature).where(PackageFeature.id == feature_id))
            db.session.commit()
        return result.rowcount > 0

    def serialize(self, record):
        data = super().serialize(record)
        data['features'] = [feature.to_dict() for feature in self.features_for(record.id)]
        return data


pricing = PricingRepository(ResourceConfig(
    name='pricing',
    label='Pricing package',
    model=PricingPackage,
    schema=PricingPackageInput,
    visible=lambda m: m.is_active.is_(True),
))
