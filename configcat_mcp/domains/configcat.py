"""
ConfigCat Public Management API Domain

Endpoints for the ConfigCat Public Management API.
https://api.configcat.com/docs

This domain provides:
- Organizations, Products, Configs and Environments
- Feature Flags / Settings and their values (v1 and v2 models)
- Tags, Segments, Webhooks, Permission Groups, Integrations
- Members, invitations, audit logs and stale flag reports

Most tools declare their input as JSON Schema. The few that take a small,
stable body are declared as pydantic models instead.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ..endpoints import (
    EndpointDescriptor,
    HttpMethod,
    header_param,
    path_param,
    query_param,
)


# -----------------------------------------------------------------------------
# Schema fragments
# -----------------------------------------------------------------------------


def _uuid(description: str) -> dict[str, Any]:
    return {"type": "string", "format": "uuid", "description": description}


def _int(description: str, **bounds: int) -> dict[str, Any]:
    return {"type": "integer", "description": description, **bounds}


def _bool(description: str) -> dict[str, Any]:
    return {"type": "boolean", "description": description}


def _string(
    description: str,
    *,
    min_length: int | None = None,
    max_length: int | None = None,
    nullable: bool = False,
) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "type": ["string", "null"] if nullable else "string",
        "description": description,
    }
    if min_length is not None:
        schema["minLength"] = min_length
    if max_length is not None:
        schema["maxLength"] = max_length
    return schema


def _nullable_int(description: str) -> dict[str, Any]:
    return {"type": ["integer", "null"], "description": description}


def _enum(description: str, *values: str, nullable: bool = False) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "string", "enum": list(values), "description": description}
    if nullable:
        schema["nullable"] = True
    return schema


def _object(required: list[str] | None = None, **properties: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": required or [],
    }


_ANY_VALUE = {
    "anyOf": [{"type": "boolean"}, {"type": "string"}, {"type": "number"}],
    "description": "The value to serve. It must respect the setting type.",
}

_PRODUCT_ID = _uuid("The identifier of the Product.")
_CONFIG_ID = _uuid("The identifier of the Config.")
_ENVIRONMENT_ID = _uuid("The identifier of the Environment.")
_ORGANIZATION_ID = _uuid("The identifier of the Organization.")
_SETTING_ID = _int("The identifier of the Setting.")
_ORDER = _nullable_int(
    "The order represented on the ConfigCat Dashboard. "
    "Determined from an ascending sequence of integers."
)

_COMPARATORS = (
    "isOneOf", "isNotOneOf", "contains", "doesNotContain",
    "semVerIsOneOf", "semVerIsNotOneOf", "semVerLess", "semVerLessOrEquals",
    "semVerGreater", "semVerGreaterOrEquals", "numberEquals", "numberDoesNotEqual",
    "numberLess", "numberLessOrEquals", "numberGreater", "numberGreaterOrEquals",
    "sensitiveIsOneOf", "sensitiveIsNotOneOf",
)

_AUDIT_LOG_TYPES = (
    "productCreated", "productChanged", "productOwnershipTransferred", "productDeleted",
    "teamMemberInvited", "teamMemberJoined", "teamMemberRemoved",
    "configCreated", "configChanged", "configDeleted",
    "environmentCreated", "environmentChanged", "environmentDeleted",
    "settingCreated", "settingChanged", "settingDeleted", "settingValueChanged",
    "webHookCreated", "webHookChanged", "webHookDeleted",
    "permissionGroupCreated", "permissionGroupChanged", "permissionGroupDeleted",
    "tagAdded", "tagChanged", "tagRemoved", "settingTagAdded", "settingTagRemoved",
    "segmentCreated", "segmentChanged", "segmentDeleted",
)

_JSON_PATCH = {
    "type": "array",
    "items": _object(
        ["op", "path"],
        op=_enum("The operation type.", "unknown", "add", "remove", "replace", "move", "copy", "test"),
        path=_string("The source path.", min_length=1),
        **{"from": _string("The target path.", nullable=True)},
        value={"description": "The discrete value."},
    ),
    "description": "JSON Patch operations.",
}

_ROLLOUT_RULES = {
    "type": "array",
    "items": _object(
        ["value"],
        comparisonAttribute=_string("The user attribute to compare.", max_length=1000, nullable=True),
        comparator=_enum("The comparison operator.", *_COMPARATORS, nullable=True),
        comparisonValue=_string("The value to compare against.", nullable=True),
        value=_ANY_VALUE,
        segmentComparator=_enum("The segment comparison operator.", "isIn", "isNotIn", nullable=True),
        segmentId={**_uuid("The segment to compare against."), "nullable": True},
    ),
    "description": "The targeting rule collection.",
}

_PERCENTAGE_ITEMS = {
    "type": "array",
    "items": _object(
        ["percentage", "value"],
        percentage=_int("The percentage value for the rule.", minimum=0, maximum=100),
        value=_ANY_VALUE,
    ),
    "description": "The percentage rule collection.",
}

_REASON = _string(
    "The reason note for the Audit Log if the Product's "
    "\"Config changes require a reason\" preference is turned on."
)
_SDK_KEY = {"X-CONFIGCAT-SDKKEY": _string("The ConfigCat SDK Key.")}
_SETTING_KEY_OR_ID = _string("The key or id of the Setting.")
_WEBHOOK_ID = _int("The identifier of the Webhook.")
_PERMISSION_GROUP_ID = _int("The identifier of the Permission Group.")
_INTEGRATION_ID = _uuid("The identifier of the Integration.")
_SEGMENT_ID = _uuid("The identifier of the Segment.")


def _nullable_bool(description: str) -> dict[str, Any]:
    return {"type": ["boolean", "null"], "description": description}


# Config V2 ----------------------------------------------------------------

_V2_COMPARATORS = (
    "isOneOf", "isNotOneOf", "containsAnyOf", "doesNotContainAnyOf",
    "semVerIsOneOf", "semVerIsNotOneOf", "semVerLess", "semVerLessOrEquals",
    "semVerGreater", "semVerGreaterOrEquals", "numberEquals", "numberDoesNotEqual",
    "numberLess", "numberLessOrEquals", "numberGreater", "numberGreaterOrEquals",
    "sensitiveIsOneOf", "sensitiveIsNotOneOf", "dateTimeBefore", "dateTimeAfter",
    "sensitiveTextEquals", "sensitiveTextDoesNotEqual",
    "sensitiveTextStartsWithAnyOf", "sensitiveTextNotStartsWithAnyOf",
    "sensitiveTextEndsWithAnyOf", "sensitiveTextNotEndsWithAnyOf",
    "sensitiveArrayContainsAnyOf", "sensitiveArrayDoesNotContainAnyOf",
    "textEquals", "textDoesNotEqual", "textStartsWithAnyOf", "textNotStartsWithAnyOf",
    "textEndsWithAnyOf", "textNotEndsWithAnyOf", "arrayContainsAnyOf", "arrayDoesNotContainAnyOf",
)

_SETTING_VALUE_V2 = {
    **_object(
        boolValue=_nullable_bool("The served value in case of a boolean Feature Flag."),
        stringValue=_string("The served value in case of a text Setting.", nullable=True),
        intValue=_nullable_int("The served value in case of a whole number Setting."),
        doubleValue={
            "type": ["number", "null"],
            "description": "The served value in case of a decimal number Setting.",
        },
    ),
    "description": "Represents the value of a Feature Flag or Setting.",
}

_CONDITIONS = {
    "type": ["array", "null"],
    "items": _object(
        userCondition={
            **_object(
                ["comparisonAttribute", "comparator", "comparisonValue"],
                comparisonAttribute=_string(
                    "The User Object attribute that the condition is based on.",
                    min_length=1,
                    max_length=1000,
                ),
                comparator=_enum("The comparison operator.", *_V2_COMPARATORS),
                comparisonValue=_object(
                    stringValue=_string("The string representation of the comparison value.", nullable=True),
                    doubleValue={
                        "type": ["number", "null"],
                        "description": "The number representation of the comparison value.",
                    },
                    listValue={
                        "type": ["array", "null"],
                        "items": _object(
                            ["value"],
                            value=_string("The actual comparison value."),
                            hint=_string(
                                "An optional hint for the comparison value.",
                                max_length=1500,
                                nullable=True,
                            ),
                        ),
                        "description": "The list representation of the comparison value.",
                    },
                ),
            ),
            "nullable": True,
        },
        segmentCondition={
            **_object(
                ["segmentId", "comparator"],
                segmentId=_uuid("The segment's identifier."),
                comparator=_enum("The segment comparison operator.", "isIn", "isNotIn"),
            ),
            "nullable": True,
        },
        prerequisiteFlagCondition={
            **_object(
                ["prerequisiteSettingId", "comparator", "prerequisiteComparisonValue"],
                prerequisiteSettingId=_int("The prerequisite flag's identifier."),
                comparator=_enum("Prerequisite flag comparison operator.", "equals", "doesNotEqual"),
                prerequisiteComparisonValue=_SETTING_VALUE_V2,
            ),
            "nullable": True,
        },
    ),
    "description": "The list of conditions that are combined with logical AND operators.",
}

_TARGETING_RULES = {
    "type": ["array", "null"],
    "items": _object(
        conditions=_CONDITIONS,
        percentageOptions={
            "type": ["array", "null"],
            "items": _object(
                ["percentage", "value"],
                percentage=_int(
                    "A number between 0 and 100 that represents a randomly allocated fraction of the users."
                ),
                value=_SETTING_VALUE_V2,
            ),
            "description": "The percentage options the evaluation process chooses a value from.",
        },
        value={**_SETTING_VALUE_V2, "nullable": True},
    ),
    "description": "The targeting rules of the Feature Flag or Setting.",
}

_PERCENTAGE_EVALUATION_ATTRIBUTE = _string(
    "The user attribute used for percentage evaluation. "
    "If not set, it defaults to the `Identifier` user object attribute.",
    max_length=1000,
    nullable=True,
)


def _setting_formula(required: list[str] | None = None, **extra: dict[str, Any]) -> dict[str, Any]:
    return _object(
        ["defaultValue", *(required or [])],
        defaultValue=_SETTING_VALUE_V2,
        targetingRules=_TARGETING_RULES,
        percentageEvaluationAttribute=_PERCENTAGE_EVALUATION_ATTRIBUTE,
        **extra,
    )


# Webhooks, permission groups and integrations ------------------------------

_WEBHOOK_BODY = _object(
    ["url"],
    url=_string("The URL of the Webhook.", min_length=7, max_length=1000),
    content=_string("The HTTP body content.", max_length=15000, nullable=True),
    httpMethod=_enum("The HTTP method of the Webhook.", "get", "post", nullable=True),
    webHookHeaders={
        "type": ["array", "null"],
        "items": _object(
            ["key", "value"],
            key=_string("Header name.", min_length=1, max_length=255),
            value=_string("Header value.", min_length=1, max_length=1000),
            isSecure=_bool("Indicates whether the header value is sensitive."),
        ),
        "description": "List of HTTP headers.",
    },
)

_PERMISSIONS = {
    "canManageMembers": "Group members can manage team members.",
    "canCreateOrUpdateConfig": "Group members can create/update Configs.",
    "canDeleteConfig": "Group members can delete Configs.",
    "canCreateOrUpdateEnvironment": "Group members can create/update Environments.",
    "canDeleteEnvironment": "Group members can delete Environments.",
    "canCreateOrUpdateSetting": "Group members can create/update Feature Flags and Settings.",
    "canTagSetting": "Group members can attach/detach Tags to Feature Flags and Settings.",
    "canDeleteSetting": "Group members can delete Feature Flags and Settings.",
    "canCreateOrUpdateTag": "Group members can create/update Tags.",
    "canDeleteTag": "Group members can delete Tags.",
    "canManageWebhook": "Group members can create/update/delete Webhooks.",
    "canUseExportImport": "Group members can use the export/import feature.",
    "canManageProductPreferences": "Group members can update Product preferences.",
    "canManageIntegrations": "Group members can add and configure integrations.",
    "canViewSdkKey": "Group members has access to SDK keys.",
    "canRotateSdkKey": "Group members can rotate SDK keys.",
    "canCreateOrUpdateSegments": "Group members can create/update Segments.",
    "canDeleteSegments": "Group members can delete Segments.",
    "canViewProductAuditLog": "Group members has access to audit logs.",
    "canViewProductStatistics": "Group members has access to product statistics.",
    "canDisable2FA": "Group members can disable two-factor authentication for other members.",
}

_ACCESS_TYPES = ("readOnly", "full", "custom")
_ENVIRONMENT_ACCESS_TYPES = ("full", "readOnly", "none")

_ENVIRONMENT_ACCESSES = {
    "type": ["array", "null"],
    "items": _object(
        ["environmentId", "environmentAccessType"],
        environmentId=_uuid("Identifier of the Environment."),
        environmentAccessType=_enum(
            "Represent the environment specific Feature Management permission.",
            *_ENVIRONMENT_ACCESS_TYPES,
        ),
    ),
    "description": "List of environment specific permissions.",
}


def _permission_group_body(*, update: bool) -> dict[str, Any]:
    flag = _nullable_bool if update else _bool
    return _object(
        None if update else ["name"],
        name=_string(
            "Name of the Permission Group.",
            min_length=None if update else 1,
            max_length=255,
            nullable=update,
        ),
        **{name: flag(description) for name, description in _PERMISSIONS.items()},
        accessType=_enum("Represent the Feature Management permission.", *_ACCESS_TYPES, nullable=update),
        newEnvironmentAccessType=_enum(
            "Represent the environment specific Feature Management permission.",
            *_ENVIRONMENT_ACCESS_TYPES,
            nullable=update,
        ),
        environmentAccesses=_ENVIRONMENT_ACCESSES,
    )


_INTEGRATION_PARAMETERS_HELP = """

The Parameters dictionary differs for each IntegrationType:
- Datadog: `apikey` (required), `site` (`Us`, `Eu`, `Us1Fed`, `Us3`, `Us5`; default `Us`).
- Slack: `incoming_webhook.url` (required), the incoming webhook URL to post messages to.
- Amplitude: `apiKey` and `secretKey` (both required).
- Mixpanel: `serviceAccountUserName`, `serviceAccountSecret` and `projectId` (required),
  `server` (`StandardServer`, `EUResidencyServer`; default `StandardServer`).
- Twilio Segment: `writeKey` (required), `server` (`Us`, `Eu`; default `Us`).
- PubNub (work in progress)"""


def _integration_body(*, with_type: bool) -> dict[str, Any]:
    properties: dict[str, dict[str, Any]] = {}
    if with_type:
        properties["integrationType"] = _enum(
            "The type of the Integration.",
            "dataDog", "slack", "amplitude", "mixPanel", "segment", "pubNub",
        )
    properties.update(
        name=_string("Name of the Integration.", min_length=1),
        parameters={
            "type": "object",
            "additionalProperties": {"type": ["string", "null"]},
            "description": "Parameters of the Integration.",
        },
        environmentIds={
            "type": "array",
            "items": {"type": "string", "format": "uuid"},
            "description": (
                "List of Environment IDs that are connected with this Integration. "
                "If the list is empty, all of the Environments are connected."
            ),
        },
        configIds={
            "type": "array",
            "items": {"type": "string", "format": "uuid"},
            "description": (
                "List of Config IDs that are connected with this Integration. "
                "If the list is empty, all of the Configs are connected."
            ),
        },
    )
    return _object(list(properties), **properties)


# -----------------------------------------------------------------------------
# Native argument models
# -----------------------------------------------------------------------------


class _Arguments(BaseModel):
    """Base for tool argument models. Unknown fields are kept."""

    model_config = ConfigDict(extra="allow")


class TagBody(_Arguments):
    name: Annotated[str, Field(min_length=1, max_length=255, description="Name of the Tag.")]
    color: Annotated[str, Field(max_length=255)] | None = Field(
        default=None,
        description=(
            "Color of the Tag. Possible values: `panther`, `whale`, `salmon`, "
            "`lizard`, `canary`, `koala`, or any HTML color code."
        ),
    )


class CreateTagArguments(_Arguments):
    productId: UUID = Field(description="The identifier of the Product.")  # noqa: N815
    requestBody: TagBody  # noqa: N815


class TagUpdateBody(_Arguments):
    name: Annotated[str, Field(max_length=255)] | None = Field(default=None, description="The name of the Tag.")
    color: Annotated[str, Field(max_length=255)] | None = Field(default=None, description="Color of the Tag.")


class UpdateTagArguments(_Arguments):
    tagId: int = Field(description="The identifier of the Tag.")  # noqa: N815
    requestBody: TagUpdateBody  # noqa: N815


class ProductBody(_Arguments):
    name: Annotated[str, Field(min_length=1, max_length=1000, description="The name of the Product.")]
    description: Annotated[str, Field(max_length=1000)] | None = Field(
        default=None, description="The description of the Product."
    )
    order: int | None = Field(default=None, description="The order of the Product on the Dashboard.")


class CreateProductArguments(_Arguments):
    organizationId: UUID = Field(description="The identifier of the Organization.")  # noqa: N815
    requestBody: ProductBody  # noqa: N815


class InviteBody(_Arguments):
    emails: list[str] = Field(min_length=1, description="List of email addresses to invite.")
    permissionGroupId: int = Field(  # noqa: N815
        description="Identifier of the Permission Group to where the invited users should be added."
    )


class InviteMemberArguments(_Arguments):
    productId: UUID = Field(description="The identifier of the Product.")  # noqa: N815
    requestBody: InviteBody  # noqa: N815


class StaleFlagsArguments(_Arguments):
    productId: UUID = Field(description="The identifier of the Product.")  # noqa: N815
    scope: Literal["all", "watchedByMe"] | None = Field(default=None, description="The scope of the report.")
    staleFlagAgeDays: int | None = Field(  # noqa: N815
        default=None,
        ge=7,
        le=90,
        description="The inactivity in days after a feature flag should be considered stale.",
    )
    staleFlagStaleInEnvironmentsType: Literal[  # noqa: N815
        "staleInAnyEnvironments", "staleInAllEnvironments"
    ] | None = Field(default=None, description="Stale in all or any of the environments.")
    ignoredEnvironmentIds: list[UUID] | None = Field(  # noqa: N815
        default=None, description="Ignore environment identifiers from the report."
    )
    ignoredTagIds: list[int] | None = Field(  # noqa: N815
        default=None, description="Ignore feature flags from the report based on their tag identifiers."
    )


# -----------------------------------------------------------------------------
# Endpoint table
# -----------------------------------------------------------------------------


CONFIGCAT_ENDPOINTS: list[EndpointDescriptor] = [
    # Organizations ----------------------------------------------------------
    EndpointDescriptor(
        name="list-organizations",
        description="This endpoint returns the list of the Organizations that belongs to the user.",
        input_schema=_object(),
        method=HttpMethod.GET,
        path_template="/v1/organizations",
    ),
    EndpointDescriptor(
        name="list-organization-members",
        description=(
            "This endpoint returns the list of Members that belongs to the given "
            "Organization, identified by the `organizationId` parameter."
        ),
        input_schema=_object(["organizationId"], organizationId=_ORGANIZATION_ID),
        method=HttpMethod.GET,
        path_template="/v2/organizations/{organizationId}/members",
        bindings=(path_param("organizationId"),),
    ),
    EndpointDescriptor(
        name="list-pending-invitations-org",
        description=(
            "This endpoint returns the list of pending invitations within the given "
            "Organization identified by the `organizationId` parameter."
        ),
        input_schema=_object(["organizationId"], organizationId=_ORGANIZATION_ID),
        method=HttpMethod.GET,
        path_template="/v1/organizations/{organizationId}/invitations",
        bindings=(path_param("organizationId"),),
    ),
    EndpointDescriptor(
        name="list-organization-auditlogs",
        description=(
            "This endpoint returns the list of Audit log items for a given Organization "
            "and the result can be optionally filtered by Product and/or Config and/or "
            "Environment. If neither `fromUtcDateTime` nor `toUtcDateTime` is set, the "
            "audit logs for the last 7 days will be returned."
        ),
        input_schema=_object(
            ["organizationId"],
            organizationId=_ORGANIZATION_ID,
            productId=_PRODUCT_ID,
            configId=_CONFIG_ID,
            environmentId=_ENVIRONMENT_ID,
            auditLogType=_enum("Filter Audit logs by Audit log type.", *_AUDIT_LOG_TYPES, nullable=True),
            fromUtcDateTime={"type": "string", "format": "date-time", "description": "Starting UTC date."},
            toUtcDateTime={"type": "string", "format": "date-time", "description": "Ending UTC date."},
        ),
        method=HttpMethod.GET,
        path_template="/v1/organizations/{organizationId}/auditlogs",
        bindings=(
            path_param("organizationId"),
            query_param("productId"),
            query_param("configId"),
            query_param("environmentId"),
            query_param("auditLogType"),
            query_param("fromUtcDateTime"),
            query_param("toUtcDateTime"),
        ),
    ),
    EndpointDescriptor(
        name="update-member-permissions",
        description=(
            "This endpoint updates the permissions of a Member identified by the `userId`. "
            "It can also be used to move a Member between Permission Groups within a Product."
        ),
        input_schema=_object(
            ["organizationId", "userId", "requestBody"],
            organizationId=_ORGANIZATION_ID,
            userId=_string("The identifier of the Member."),
            requestBody=_object(
                permissionGroupIds={
                    "type": ["array", "null"],
                    "items": {"type": "integer"},
                    "description": "Permission Group identifiers to where the Member should be added.",
                },
                isAdmin={"type": ["boolean", "null"], "description": "Organization Admin flag."},
                isBillingManager={"type": ["boolean", "null"], "description": "Billing Manager flag."},
                removeFromPermissionGroupsWhereIdNotSet=_bool(
                    "Remove the member from Permission Groups not listed in `permissionGroupIds`."
                ),
            ),
        ),
        method=HttpMethod.POST,
        path_template="/v1/organizations/{organizationId}/members/{userId}",
        bindings=(path_param("organizationId"), path_param("userId")),
    ),
    EndpointDescriptor(
        name="delete-organization-member",
        description=(
            "This endpoint removes a Member identified by the `userId` from the given "
            "Organization identified by the `organizationId` parameter."
        ),
        input_schema=_object(
            ["organizationId", "userId"],
            organizationId=_ORGANIZATION_ID,
            userId=_string("The identifier of the Member."),
        ),
        method=HttpMethod.DELETE,
        path_template="/v1/organizations/{organizationId}/members/{userId}",
        bindings=(path_param("organizationId"), path_param("userId")),
    ),
    EndpointDescriptor(
        name="delete-invitation",
        description="This endpoint removes an Invitation identified by the `invitationId` parameter.",
        input_schema=_object(["invitationId"], invitationId=_uuid("The identifier of the Invitation.")),
        method=HttpMethod.DELETE,
        path_template="/v1/invitations/{invitationId}",
        bindings=(path_param("invitationId"),),
    ),
    # Products ---------------------------------------------------------------
    EndpointDescriptor(
        name="list-products",
        description="This endpoint returns the list of the Products that belongs to the user.",
        input_schema=_object(),
        method=HttpMethod.GET,
        path_template="/v1/products",
    ),
    EndpointDescriptor(
        name="get-product",
        description="This endpoint returns the metadata of a Product identified by the `productId`.",
        input_schema=_object(["productId"], productId=_PRODUCT_ID),
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="create-product",
        description=(
            "This endpoint creates a new Product in a specified Organization identified by "
            "the `organizationId` parameter, which can be obtained from the List Organizations endpoint."
        ),
        input_schema=CreateProductArguments,
        method=HttpMethod.POST,
        path_template="/v1/organizations/{organizationId}/products",
        bindings=(path_param("organizationId"),),
    ),
    EndpointDescriptor(
        name="update-product",
        description="This endpoint updates a Product identified by the `productId` parameter.",
        input_schema=_object(
            ["productId", "requestBody"],
            productId=_PRODUCT_ID,
            requestBody=_object(
                name=_string("The name of the Product.", max_length=1000, nullable=True),
                description=_string("The description of the Product.", max_length=1000, nullable=True),
                order=_ORDER,
            ),
        ),
        method=HttpMethod.PUT,
        path_template="/v1/products/{productId}",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="delete-product",
        description="This endpoint removes a Product identified by the `productId` parameter.",
        input_schema=_object(["productId"], productId=_PRODUCT_ID),
        method=HttpMethod.DELETE,
        path_template="/v1/products/{productId}",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="list-product-members",
        description=(
            "This endpoint returns the list of Members that belongs to the given Product, "
            "identified by the `productId` parameter."
        ),
        input_schema=_object(["productId"], productId=_PRODUCT_ID),
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}/members",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="list-pending-invitations",
        description=(
            "This endpoint returns the list of pending invitations within the given Product "
            "identified by the `productId` parameter."
        ),
        input_schema=_object(["productId"], productId=_PRODUCT_ID),
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}/invitations",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="invite-member",
        description="This endpoint invites a Member into the given Product identified by the `productId` parameter.",
        input_schema=InviteMemberArguments,
        method=HttpMethod.POST,
        path_template="/v1/products/{productId}/members/invite",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="delete-product-member",
        description=(
            "This endpoint removes a Member identified by the `userId` from the given "
            "Product identified by the `productId` parameter."
        ),
        input_schema=_object(
            ["productId", "userId"],
            productId=_PRODUCT_ID,
            userId=_string("The identifier of the Member."),
        ),
        method=HttpMethod.DELETE,
        path_template="/v1/products/{productId}/members/{userId}",
        bindings=(path_param("productId"), path_param("userId")),
    ),
    EndpointDescriptor(
        name="get-product-preferences",
        description="This endpoint returns the preferences of a Product identified by the `productId`.",
        input_schema=_object(["productId"], productId=_PRODUCT_ID),
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}/preferences",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="update-product-preferences",
        description="This endpoint updates the preferences of a Product identified by the `productId` parameter.",
        input_schema=_object(
            ["productId", "requestBody"],
            productId=_PRODUCT_ID,
            requestBody=_object(
                reasonRequired=_nullable_bool(
                    "Indicates that a mandatory note is required for saving and publishing."
                ),
                keyGenerationMode=_enum(
                    "Determines the Feature Flag key generation mode.",
                    "camelCase", "lowerCase", "upperCase", "pascalCase", "kebabCase",
                    nullable=True,
                ),
                showVariationId=_nullable_bool(
                    "Indicates whether a variation ID's must be shown on the ConfigCat Dashboard."
                ),
                mandatorySettingHint=_nullable_bool(
                    "Indicates whether Feature flags and Settings must have a hint."
                ),
                reasonRequiredEnvironments={
                    "type": ["array", "null"],
                    "items": _object(
                        ["environmentId", "reasonRequired"],
                        environmentId=_uuid("Identifier of the Environment."),
                        reasonRequired=_bool(
                            "Indicates that a mandatory note is required in this Environment "
                            "for saving and publishing."
                        ),
                    ),
                    "description": (
                        "List of Environments where mandatory note must be set before saving and publishing."
                    ),
                },
            ),
        ),
        method=HttpMethod.POST,
        path_template="/v1/products/{productId}/preferences",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="list-auditlogs",
        description=(
            "This endpoint returns the list of Audit log items for a given Product and the "
            "result can be optionally filtered by Config and/or Environment. The distance "
            "between `fromUtcDateTime` and `toUtcDateTime` cannot exceed 30 days."
        ),
        input_schema=_object(
            ["productId"],
            productId=_PRODUCT_ID,
            configId=_CONFIG_ID,
            environmentId=_ENVIRONMENT_ID,
            auditLogType=_enum("Filter Audit logs by Audit log type.", *_AUDIT_LOG_TYPES, nullable=True),
            fromUtcDateTime={"type": "string", "format": "date-time", "description": "Starting UTC date."},
            toUtcDateTime={"type": "string", "format": "date-time", "description": "Ending UTC date."},
        ),
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}/auditlogs",
        bindings=(
            path_param("productId"),
            query_param("configId"),
            query_param("environmentId"),
            query_param("auditLogType"),
            query_param("fromUtcDateTime"),
            query_param("toUtcDateTime"),
        ),
    ),
    EndpointDescriptor(
        name="list-staleflags",
        description=(
            "This endpoint returns the list of Zombie (stale) flags for a given Product and "
            "the result can be optionally filtered by various parameters."
        ),
        input_schema=StaleFlagsArguments,
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}/staleflags",
        bindings=(
            path_param("productId"),
            query_param("scope"),
            query_param("staleFlagAgeDays"),
            query_param("staleFlagStaleInEnvironmentsType"),
            query_param("ignoredEnvironmentIds"),
            query_param("ignoredTagIds"),
        ),
    ),
    # Configs ----------------------------------------------------------------
    EndpointDescriptor(
        name="list-configs",
        description=(
            "This endpoint returns the list of the Configs that belongs to the given Product "
            "identified by the `productId` parameter."
        ),
        input_schema=_object(["productId"], productId=_PRODUCT_ID),
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}/configs",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="get-config",
        description="This endpoint returns the metadata of a Config identified by the `configId`.",
        input_schema=_object(["configId"], configId=_CONFIG_ID),
        method=HttpMethod.GET,
        path_template="/v1/configs/{configId}",
        bindings=(path_param("configId"),),
    ),
    EndpointDescriptor(
        name="create-config",
        description=(
            "This endpoint creates a new Config in a specified Product identified by the "
            "`productId` parameter, which can be obtained from the List Products endpoint."
        ),
        input_schema=_object(
            ["productId", "requestBody"],
            productId=_PRODUCT_ID,
            requestBody=_object(
                ["name"],
                name=_string("The name of the Config.", min_length=1, max_length=255),
                description=_string("The description of the Config.", max_length=1000, nullable=True),
                order=_ORDER,
                evaluationVersion=_enum(
                    "Determines the evaluation version of a Config. "
                    "Using `v2` enables the new features of Config V2.",
                    "v1",
                    "v2",
                ),
            ),
        ),
        method=HttpMethod.POST,
        path_template="/v1/products/{productId}/configs",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="update-config",
        description="This endpoint updates a Config identified by the `configId` parameter.",
        input_schema=_object(
            ["configId", "requestBody"],
            configId=_CONFIG_ID,
            requestBody=_object(
                name=_string("The name of the Config.", max_length=255, nullable=True),
                description=_string("The description of the Config.", max_length=1000, nullable=True),
                order=_ORDER,
            ),
        ),
        method=HttpMethod.PUT,
        path_template="/v1/configs/{configId}",
        bindings=(path_param("configId"),),
    ),
    EndpointDescriptor(
        name="delete-config",
        description="This endpoint removes a Config identified by the `configId` parameter.",
        input_schema=_object(["configId"], configId=_CONFIG_ID),
        method=HttpMethod.DELETE,
        path_template="/v1/configs/{configId}",
        bindings=(path_param("configId"),),
    ),
    EndpointDescriptor(
        name="get-sdk-keys",
        description="This endpoint returns the SDK Key for your Config in a specified Environment.",
        input_schema=_object(
            ["configId", "environmentId"],
            configId=_CONFIG_ID,
            environmentId=_ENVIRONMENT_ID,
        ),
        method=HttpMethod.GET,
        path_template="/v1/configs/{configId}/environments/{environmentId}",
        bindings=(path_param("configId"), path_param("environmentId")),
    ),
    # Environments -----------------------------------------------------------
    EndpointDescriptor(
        name="list-environments",
        description=(
            "This endpoint returns the list of the Environments that belongs to the given "
            "Product identified by the `productId` parameter."
        ),
        input_schema=_object(["productId"], productId=_PRODUCT_ID),
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}/environments",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="get-environment",
        description="This endpoint returns the metadata of an Environment identified by the `environmentId`.",
        input_schema=_object(["environmentId"], environmentId=_ENVIRONMENT_ID),
        method=HttpMethod.GET,
        path_template="/v1/environments/{environmentId}",
        bindings=(path_param("environmentId"),),
    ),
    EndpointDescriptor(
        name="create-environment",
        description=(
            "This endpoint creates a new Environment in a specified Product identified by "
            "the `productId` parameter."
        ),
        input_schema=_object(
            ["productId", "requestBody"],
            productId=_PRODUCT_ID,
            requestBody=_object(
                ["name"],
                name=_string("The name of the Environment.", min_length=1, max_length=255),
                color=_string(
                    "The color of the Environment. RGB or HTML color codes are allowed.",
                    max_length=255,
                    nullable=True,
                ),
                description=_string("The description of the Environment.", max_length=1000, nullable=True),
                order=_ORDER,
            ),
        ),
        method=HttpMethod.POST,
        path_template="/v1/products/{productId}/environments",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="update-environment",
        description="This endpoint updates an Environment identified by the `environmentId` parameter.",
        input_schema=_object(
            ["environmentId", "requestBody"],
            environmentId=_ENVIRONMENT_ID,
            requestBody=_object(
                name=_string("The name of the Environment.", max_length=255, nullable=True),
                color=_string(
                    "The color of the Environment. RGB or HTML color codes are allowed.",
                    max_length=255,
                    nullable=True,
                ),
                description=_string("The description of the Environment.", max_length=1000, nullable=True),
                order=_ORDER,
            ),
        ),
        method=HttpMethod.PUT,
        path_template="/v1/environments/{environmentId}",
        bindings=(path_param("environmentId"),),
    ),
    EndpointDescriptor(
        name="delete-environment",
        description=(
            "This endpoint removes an Environment identified by the `environmentId` parameter. "
            "If the `cleanupAuditLogs` flag is set to true, it also deletes the audit log "
            "records related to the environment."
        ),
        input_schema=_object(
            ["environmentId"],
            environmentId=_ENVIRONMENT_ID,
            cleanupAuditLogs=_bool(
                "Whether the audit log records related to the environment should be deleted."
            ),
        ),
        method=HttpMethod.DELETE,
        path_template="/v1/environments/{environmentId}",
        bindings=(path_param("environmentId"), query_param("cleanupAuditLogs")),
    ),
    # Tags -------------------------------------------------------------------
    EndpointDescriptor(
        name="list-tags",
        description=(
            "This endpoint returns the list of the Tags in a specified Product, identified "
            "by the `productId` parameter."
        ),
        input_schema=_object(["productId"], productId=_PRODUCT_ID),
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}/tags",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="create-tag",
        description=(
            "This endpoint creates a new Tag in a specified Product identified by the "
            "`productId` parameter, which can be obtained from the List Products endpoint."
        ),
        input_schema=CreateTagArguments,
        method=HttpMethod.POST,
        path_template="/v1/products/{productId}/tags",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="get-tag",
        description="This endpoint returns the metadata of a Tag identified by the `tagId`.",
        input_schema=_object(["tagId"], tagId=_int("The identifier of the Tag.")),
        method=HttpMethod.GET,
        path_template="/v1/tags/{tagId}",
        bindings=(path_param("tagId"),),
    ),
    EndpointDescriptor(
        name="update-tag",
        description="This endpoint updates a Tag identified by the `tagId` parameter.",
        input_schema=UpdateTagArguments,
        method=HttpMethod.PUT,
        path_template="/v1/tags/{tagId}",
        bindings=(path_param("tagId"),),
    ),
    EndpointDescriptor(
        name="delete-tag",
        description=(
            "This endpoint deletes a Tag identified by the `tagId` parameter. To remove a Tag "
            "from a Feature Flag or Setting use the update-setting tool."
        ),
        input_schema=_object(["tagId"], tagId=_int("The identifier of the Tag.")),
        method=HttpMethod.DELETE,
        path_template="/v1/tags/{tagId}",
        bindings=(path_param("tagId"),),
    ),
    EndpointDescriptor(
        name="list-settings-by-tag",
        description=(
            "This endpoint returns the list of the Settings that has the specified Tag, "
            "identified by the `tagId` parameter."
        ),
        input_schema=_object(["tagId"], tagId=_int("The identifier of the Tag.")),
        method=HttpMethod.GET,
        path_template="/v1/tags/{tagId}/settings",
        bindings=(path_param("tagId"),),
    ),
    # Segments ---------------------------------------------------------------
    EndpointDescriptor(
        name="list-segments",
        description=(
            "This endpoint returns the list of the Segments that belongs to the given "
            "Product identified by the `productId` parameter."
        ),
        input_schema=_object(["productId"], productId=_PRODUCT_ID),
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}/segments",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="create-segment",
        description=(
            "This endpoint creates a new Segment in a specified Product identified by the "
            "`productId` parameter."
        ),
        input_schema=_object(
            ["productId", "requestBody"],
            productId=_PRODUCT_ID,
            requestBody=_object(
                ["name", "comparisonAttribute", "comparator", "comparisonValue"],
                name=_string("Name of the Segment.", min_length=1, max_length=255),
                description=_string("Description of the Segment.", max_length=1000, nullable=True),
                comparisonAttribute=_string(
                    "The user's attribute the evaluation process must take into account.",
                    min_length=1,
                    max_length=1000,
                ),
                comparator=_enum("The comparison operator.", *_COMPARATORS),
                comparisonValue=_string("The value to compare with.", min_length=1),
            ),
        ),
        method=HttpMethod.POST,
        path_template="/v1/products/{productId}/segments",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="get-segment",
        description="This endpoint returns the metadata of a Segment identified by the `segmentId`.",
        input_schema=_object(["segmentId"], segmentId=_SEGMENT_ID),
        method=HttpMethod.GET,
        path_template="/v1/segments/{segmentId}",
        bindings=(path_param("segmentId"),),
    ),
    EndpointDescriptor(
        name="update-segment",
        description="This endpoint updates a Segment identified by the `segmentId` parameter.",
        input_schema=_object(
            ["segmentId", "requestBody"],
            segmentId=_SEGMENT_ID,
            requestBody=_object(
                name=_string("Name of the Segment.", max_length=255, nullable=True),
                description=_string("Description of the Segment.", max_length=1000, nullable=True),
                comparisonAttribute=_string(
                    "The user's attribute the evaluation process must take into account.",
                    max_length=1000,
                    nullable=True,
                ),
                comparator=_enum("The comparison operator.", *_COMPARATORS, nullable=True),
                comparisonValue=_string("The value to compare with.", nullable=True),
            ),
        ),
        method=HttpMethod.PUT,
        path_template="/v1/segments/{segmentId}",
        bindings=(path_param("segmentId"),),
    ),
    EndpointDescriptor(
        name="delete-segment",
        description="This endpoint removes a Segment identified by the `segmentId` parameter.",
        input_schema=_object(["segmentId"], segmentId=_SEGMENT_ID),
        method=HttpMethod.DELETE,
        path_template="/v1/segments/{segmentId}",
        bindings=(path_param("segmentId"),),
    ),
    # Feature Flags & Settings -----------------------------------------------
    EndpointDescriptor(
        name="list-settings",
        description=(
            "This endpoint returns the list of the Feature Flags and Settings defined in a "
            "specified Config, identified by the `configId` parameter."
        ),
        input_schema=_object(["configId"], configId=_CONFIG_ID),
        method=HttpMethod.GET,
        path_template="/v1/configs/{configId}/settings",
        bindings=(path_param("configId"),),
    ),
    EndpointDescriptor(
        name="create-setting",
        description=(
            "This endpoint creates a new Feature Flag or Setting in a specified Config "
            "identified by the `configId` parameter. The `key` attribute must be unique "
            "within the given Config."
        ),
        input_schema=_object(
            ["configId", "requestBody"],
            configId=_CONFIG_ID,
            requestBody=_object(
                ["key", "name", "settingType"],
                hint=_string("A short description for the setting.", max_length=1000, nullable=True),
                tags={
                    "type": ["array", "null"],
                    "items": {"type": "integer"},
                    "description": "The IDs of the tags which are attached to the setting.",
                },
                order=_ORDER,
                key=_string("The key of the Feature Flag or Setting.", min_length=1, max_length=255),
                name=_string("The name of the Feature Flag or Setting.", min_length=1, max_length=255),
                settingType=_enum(
                    "The type of the Feature Flag or Setting.", "boolean", "string", "int", "double"
                ),
                initialValues={
                    "type": ["array", "null"],
                    "items": _object(
                        ["environmentId", "value"],
                        environmentId=_ENVIRONMENT_ID,
                        value=_ANY_VALUE,
                    ),
                    "description": "Initial value of the Feature Flag or Setting in the given Environments.",
                },
                settingIdToInitFrom=_nullable_int(
                    "The SettingId to initialize the values and tags of the Feature Flag or Setting from."
                ),
            ),
        ),
        method=HttpMethod.POST,
        path_template="/v1/configs/{configId}/settings",
        bindings=(path_param("configId"),),
    ),
    EndpointDescriptor(
        name="get-setting",
        description=(
            "This endpoint returns the metadata attributes of a Feature Flag or Setting "
            "identified by the `settingId` parameter."
        ),
        input_schema=_object(["settingId"], settingId=_SETTING_ID),
        method=HttpMethod.GET,
        path_template="/v1/settings/{settingId}",
        bindings=(path_param("settingId"),),
    ),
    EndpointDescriptor(
        name="replace-setting",
        description=(
            "This endpoint replaces the whole value of a Feature Flag or Setting identified by "
            "the `settingId` parameter. As this endpoint is doing a complete replace, every "
            "attribute that is not listed will reset."
        ),
        input_schema=_object(
            ["settingId", "requestBody"],
            settingId=_SETTING_ID,
            requestBody=_object(
                hint=_string("A short description for the setting.", max_length=1000, nullable=True),
                tags={
                    "type": ["array", "null"],
                    "items": {"type": "integer"},
                    "description": "The IDs of the tags which are attached to the setting.",
                },
                order=_ORDER,
                name=_string(
                    "The name of the Feature Flag or Setting.", min_length=1, max_length=255, nullable=True
                ),
            ),
        ),
        method=HttpMethod.PUT,
        path_template="/v1/settings/{settingId}",
        bindings=(path_param("settingId"),),
    ),
    EndpointDescriptor(
        name="update-setting",
        description=(
            "This endpoint updates the metadata of a Feature Flag or Setting with a collection "
            "of JSON Patch operations. Only the `name`, `hint` and `tags` attributes are "
            "modifiable by this endpoint."
        ),
        input_schema=_object(
            ["settingId", "requestBody"],
            settingId=_SETTING_ID,
            requestBody=_JSON_PATCH,
        ),
        method=HttpMethod.PATCH,
        path_template="/v1/settings/{settingId}",
        bindings=(path_param("settingId"),),
    ),
    EndpointDescriptor(
        name="delete-setting",
        description="This endpoint removes a Feature Flag or Setting identified by the `settingId` parameter.",
        input_schema=_object(["settingId"], settingId=_SETTING_ID),
        method=HttpMethod.DELETE,
        path_template="/v1/settings/{settingId}",
        bindings=(path_param("settingId"),),
    ),
    EndpointDescriptor(
        name="get-code-references",
        description="Get References for Feature Flag or Setting",
        input_schema=_object(["settingId"], settingId=_SETTING_ID),
        method=HttpMethod.GET,
        path_template="/v1/settings/{settingId}/code-references",
        bindings=(path_param("settingId"),),
    ),
    # Feature Flag & Setting values ------------------------------------------
    EndpointDescriptor(
        name="get-setting-value",
        description=(
            "This endpoint returns the value of a Feature Flag or Setting in a specified "
            "Environment identified by the `environmentId` parameter."
        ),
        input_schema=_object(
            ["environmentId", "settingId"],
            environmentId=_ENVIRONMENT_ID,
            settingId=_SETTING_ID,
        ),
        method=HttpMethod.GET,
        path_template="/v1/environments/{environmentId}/settings/{settingId}/value",
        bindings=(path_param("environmentId"), path_param("settingId")),
    ),
    EndpointDescriptor(
        name="replace-setting-value",
        description=(
            "This endpoint replaces the whole value of a Feature Flag or Setting in a specified "
            "Environment. As this endpoint is doing a complete replace, every attribute that "
            "is not listed will reset."
        ),
        input_schema=_object(
            ["environmentId", "settingId", "requestBody"],
            environmentId=_ENVIRONMENT_ID,
            settingId=_SETTING_ID,
            reason=_string("The reason note for the Audit Log."),
            requestBody=_object(
                ["value"],
                rolloutRules=_ROLLOUT_RULES,
                rolloutPercentageItems=_PERCENTAGE_ITEMS,
                value=_ANY_VALUE,
            ),
        ),
        method=HttpMethod.PUT,
        path_template="/v1/environments/{environmentId}/settings/{settingId}/value",
        bindings=(path_param("environmentId"), path_param("settingId"), query_param("reason")),
    ),
    EndpointDescriptor(
        name="update-setting-value",
        description=(
            "This endpoint updates the value of a Feature Flag or Setting with a collection "
            "of JSON Patch operations in a specified Environment."
        ),
        input_schema=_object(
            ["environmentId", "settingId", "requestBody"],
            environmentId=_ENVIRONMENT_ID,
            settingId=_SETTING_ID,
            reason=_string("The reason note for the Audit Log."),
            requestBody=_JSON_PATCH,
        ),
        method=HttpMethod.PATCH,
        path_template="/v1/environments/{environmentId}/settings/{settingId}/value",
        bindings=(path_param("environmentId"), path_param("settingId"), query_param("reason")),
    ),
    EndpointDescriptor(
        name="get-setting-value-by-sdkkey",
        description=(
            "This endpoint returns the value of a Feature Flag or Setting in a specified "
            "Environment identified by the SDK key passed in the `X-CONFIGCAT-SDKKEY` header."
        ),
        input_schema=_object(
            ["settingKeyOrId", "X-CONFIGCAT-SDKKEY"],
            settingKeyOrId=_SETTING_KEY_OR_ID,
            **_SDK_KEY,
        ),
        method=HttpMethod.GET,
        path_template="/v1/settings/{settingKeyOrId}/value",
        bindings=(path_param("settingKeyOrId"), header_param("X-CONFIGCAT-SDKKEY")),
    ),
    EndpointDescriptor(
        name="replace-setting-value-by-sdkkey",
        description=(
            "This endpoint replaces the value of a Feature Flag or Setting in a specified "
            "Environment identified by the SDK key passed in the `X-CONFIGCAT-SDKKEY` header. "
            "Only the `value`, `rolloutRules` and `percentageRules` attributes are modifiable "
            "by this endpoint. As this endpoint is doing a complete replace, every attribute "
            "that is not listed will reset."
        ),
        input_schema=_object(
            ["settingKeyOrId", "X-CONFIGCAT-SDKKEY", "requestBody"],
            settingKeyOrId=_SETTING_KEY_OR_ID,
            reason=_REASON,
            requestBody=_object(
                ["rolloutRules", "rolloutPercentageItems", "value"],
                rolloutRules=_ROLLOUT_RULES,
                rolloutPercentageItems=_PERCENTAGE_ITEMS,
                value=_ANY_VALUE,
            ),
            **_SDK_KEY,
        ),
        method=HttpMethod.PUT,
        path_template="/v1/settings/{settingKeyOrId}/value",
        bindings=(
            path_param("settingKeyOrId"),
            query_param("reason"),
            header_param("X-CONFIGCAT-SDKKEY"),
        ),
    ),
    EndpointDescriptor(
        name="update-setting-value-by-sdkkey",
        description=(
            "This endpoint updates the value of a Feature Flag or Setting with a collection "
            "of JSON Patch operations in a specified Environment identified by the SDK key "
            "passed in the `X-CONFIGCAT-SDKKEY` header. Only the `value`, `rolloutRules` and "
            "`percentageRules` attributes are modifiable by this endpoint."
        ),
        input_schema=_object(
            ["settingKeyOrId", "X-CONFIGCAT-SDKKEY", "requestBody"],
            settingKeyOrId=_SETTING_KEY_OR_ID,
            reason=_REASON,
            requestBody=_JSON_PATCH,
            **_SDK_KEY,
        ),
        method=HttpMethod.PATCH,
        path_template="/v1/settings/{settingKeyOrId}/value",
        bindings=(
            path_param("settingKeyOrId"),
            query_param("reason"),
            header_param("X-CONFIGCAT-SDKKEY"),
        ),
    ),
    EndpointDescriptor(
        name="get-setting-value-by-sdkkey-v2",
        description=(
            "This endpoint returns the value of a Feature Flag or Setting in a specified "
            "Environment identified by the SDK key passed in the `X-CONFIGCAT-SDKKEY` header "
            "(Config V2 model). The most important fields in the response are the "
            "`defaultValue` and the ordered `targetingRules`."
        ),
        input_schema=_object(
            ["settingKeyOrId", "X-CONFIGCAT-SDKKEY"],
            settingKeyOrId=_SETTING_KEY_OR_ID,
            **_SDK_KEY,
        ),
        method=HttpMethod.GET,
        path_template="/v2/settings/{settingKeyOrId}/value",
        bindings=(path_param("settingKeyOrId"), header_param("X-CONFIGCAT-SDKKEY")),
    ),
    EndpointDescriptor(
        name="replace-setting-value-by-sdkkey-v2",
        description=(
            "This endpoint replaces the value and the Targeting Rules of a Feature Flag or "
            "Setting in a specified Environment identified by the SDK key passed in the "
            "`X-CONFIGCAT-SDKKEY` header (Config V2 model). Only the `defaultValue`, "
            "`targetingRules` and `percentageEvaluationAttribute` fields are modifiable. "
            "Every field that is not listed will reset."
        ),
        input_schema=_object(
            ["settingKeyOrId", "X-CONFIGCAT-SDKKEY", "requestBody"],
            settingKeyOrId=_SETTING_KEY_OR_ID,
            reason=_REASON,
            requestBody=_setting_formula(),
            **_SDK_KEY,
        ),
        method=HttpMethod.PUT,
        path_template="/v2/settings/{settingKeyOrId}/value",
        bindings=(
            path_param("settingKeyOrId"),
            query_param("reason"),
            header_param("X-CONFIGCAT-SDKKEY"),
        ),
    ),
    EndpointDescriptor(
        name="update-setting-value-by-sdkkey-v2",
        description=(
            "This endpoint updates the value of a Feature Flag or Setting with a collection "
            "of JSON Patch operations in a specified Environment identified by the SDK key "
            "passed in the `X-CONFIGCAT-SDKKEY` header (Config V2 model)."
        ),
        input_schema=_object(
            ["settingKeyOrId", "X-CONFIGCAT-SDKKEY", "requestBody"],
            settingKeyOrId=_SETTING_KEY_OR_ID,
            reason=_REASON,
            requestBody=_JSON_PATCH,
            **_SDK_KEY,
        ),
        method=HttpMethod.PATCH,
        path_template="/v2/settings/{settingKeyOrId}/value",
        bindings=(
            path_param("settingKeyOrId"),
            query_param("reason"),
            header_param("X-CONFIGCAT-SDKKEY"),
        ),
    ),
    EndpointDescriptor(
        name="get-setting-value-v2",
        description=(
            "This endpoint returns the value of a Feature Flag or Setting in a specified "
            "Environment identified by the `environmentId` parameter (Config V2 model)."
        ),
        input_schema=_object(
            ["environmentId", "settingId"],
            environmentId=_ENVIRONMENT_ID,
            settingId=_SETTING_ID,
        ),
        method=HttpMethod.GET,
        path_template="/v2/environments/{environmentId}/settings/{settingId}/value",
        bindings=(path_param("environmentId"), path_param("settingId")),
    ),
    EndpointDescriptor(
        name="replace-setting-value-v2",
        description=(
            "This endpoint replaces the value and the Targeting Rules of a Feature Flag or "
            "Setting in a specified Environment identified by the `environmentId` parameter "
            "(Config V2 model). Every field that is not listed will reset."
        ),
        input_schema=_object(
            ["environmentId", "settingId", "requestBody"],
            environmentId=_ENVIRONMENT_ID,
            settingId=_SETTING_ID,
            reason=_REASON,
            requestBody=_setting_formula(),
        ),
        method=HttpMethod.PUT,
        path_template="/v2/environments/{environmentId}/settings/{settingId}/value",
        bindings=(path_param("environmentId"), path_param("settingId"), query_param("reason")),
    ),
    EndpointDescriptor(
        name="update-setting-value-v2",
        description=(
            "This endpoint updates the value of a Feature Flag or Setting with a collection "
            "of JSON Patch operations in a specified Environment (Config V2 model)."
        ),
        input_schema=_object(
            ["environmentId", "settingId", "requestBody"],
            environmentId=_ENVIRONMENT_ID,
            settingId=_SETTING_ID,
            reason=_string("The reason note for the Audit Log."),
            requestBody=_JSON_PATCH,
        ),
        method=HttpMethod.PATCH,
        path_template="/v2/environments/{environmentId}/settings/{settingId}/value",
        bindings=(path_param("environmentId"), path_param("settingId"), query_param("reason")),
    ),
    EndpointDescriptor(
        name="get-setting-values",
        description=(
            "This endpoint returns the value of a specified Config's Feature Flags or Settings "
            "identified by the `configId` parameter in a specified Environment identified by "
            "the `environmentId` parameter."
        ),
        input_schema=_object(
            ["configId", "environmentId"],
            configId=_CONFIG_ID,
            environmentId=_ENVIRONMENT_ID,
        ),
        method=HttpMethod.GET,
        path_template="/v1/configs/{configId}/environments/{environmentId}/values",
        bindings=(path_param("configId"), path_param("environmentId")),
    ),
    EndpointDescriptor(
        name="post-setting-values",
        description=(
            "This endpoint replaces the values of a specified Config's Feature Flags or Settings "
            "identified by the `configId` parameter in a specified Environment identified by "
            "the `environmentId` parameter. Only the `value`, `rolloutRules` and "
            "`percentageRules` attributes are modifiable by this endpoint."
        ),
        input_schema=_object(
            ["configId", "environmentId", "requestBody"],
            configId=_CONFIG_ID,
            environmentId=_ENVIRONMENT_ID,
            reason=_REASON,
            requestBody=_object(
                ["settingValues"],
                settingValues={
                    "type": "array",
                    "items": _object(
                        ["value"],
                        rolloutRules=_ROLLOUT_RULES,
                        rolloutPercentageItems=_PERCENTAGE_ITEMS,
                        value=_ANY_VALUE,
                        settingId=_SETTING_ID,
                    ),
                    "description": "The values to update.",
                },
            ),
        ),
        method=HttpMethod.POST,
        path_template="/v1/configs/{configId}/environments/{environmentId}/values",
        bindings=(path_param("configId"), path_param("environmentId"), query_param("reason")),
    ),
    EndpointDescriptor(
        name="get-setting-values-v2",
        description=(
            "This endpoint returns the value of a specified Config's Feature Flags or Settings "
            "identified by the `configId` parameter in a specified Environment identified by "
            "the `environmentId` parameter (Config V2 model)."
        ),
        input_schema=_object(
            ["configId", "environmentId"],
            configId=_CONFIG_ID,
            environmentId=_ENVIRONMENT_ID,
        ),
        method=HttpMethod.GET,
        path_template="/v2/configs/{configId}/environments/{environmentId}/values",
        bindings=(path_param("configId"), path_param("environmentId")),
    ),
    EndpointDescriptor(
        name="post-setting-values-v2",
        description=(
            "This endpoint batch updates the Feature Flags and Settings of a Config identified "
            "by the `configId` parameter in a specified Environment identified by the "
            "`environmentId` parameter (Config V2 model). Only the `defaultValue`, "
            "`targetingRules` and `percentageEvaluationAttribute` fields are modifiable."
        ),
        input_schema=_object(
            ["configId", "environmentId", "requestBody"],
            configId=_CONFIG_ID,
            environmentId=_ENVIRONMENT_ID,
            reason=_REASON,
            requestBody=_object(
                ["updateFormulas"],
                updateFormulas={
                    "type": "array",
                    "items": _setting_formula(
                        ["settingId"],
                        settingId=_int("The identifier of the feature flag or setting."),
                    ),
                    "description": "Evaluation descriptors of each updated Feature Flag and Setting.",
                },
            ),
        ),
        method=HttpMethod.POST,
        path_template="/v2/configs/{configId}/environments/{environmentId}/values",
        bindings=(path_param("configId"), path_param("environmentId"), query_param("reason")),
    ),
    # Webhooks ---------------------------------------------------------------
    EndpointDescriptor(
        name="list-webhooks",
        description=(
            "This endpoint returns the list of the Webhooks that belongs to the given Product "
            "identified by the `productId` parameter."
        ),
        input_schema=_object(["productId"], productId=_PRODUCT_ID),
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}/webhooks",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="get-webhook",
        description="This endpoint returns the metadata of a Webhook identified by the `webhookId`.",
        input_schema=_object(["webhookId"], webhookId=_WEBHOOK_ID),
        method=HttpMethod.GET,
        path_template="/v1/webhooks/{webhookId}",
        bindings=(path_param("webhookId"),),
    ),
    EndpointDescriptor(
        name="create-webhook",
        description=(
            "This endpoint creates a new Webhook for a Config in a specified Environment."
        ),
        input_schema=_object(
            ["configId", "environmentId", "requestBody"],
            configId=_CONFIG_ID,
            environmentId=_ENVIRONMENT_ID,
            requestBody=_WEBHOOK_BODY,
        ),
        method=HttpMethod.POST,
        path_template="/v1/configs/{configId}/environments/{environmentId}/webhooks",
        bindings=(path_param("configId"), path_param("environmentId")),
    ),
    EndpointDescriptor(
        name="replace-webhook",
        description=(
            "This endpoint replaces the whole value of a Webhook identified by the `webhookId` "
            "parameter. Every attribute that is not listed will reset."
        ),
        input_schema=_object(
            ["webhookId", "requestBody"],
            webhookId=_WEBHOOK_ID,
            requestBody=_WEBHOOK_BODY,
        ),
        method=HttpMethod.PUT,
        path_template="/v1/webhooks/{webhookId}",
        bindings=(path_param("webhookId"),),
    ),
    EndpointDescriptor(
        name="update-webhook",
        description=(
            "This endpoint updates a Webhook identified by the `webhookId` parameter with a "
            "collection of JSON Patch operations. Only the `url`, `httpMethod`, `content` and "
            "`webHookHeaders` attributes are modifiable by this endpoint."
        ),
        input_schema=_object(
            ["webhookId", "requestBody"],
            webhookId=_WEBHOOK_ID,
            requestBody=_JSON_PATCH,
        ),
        method=HttpMethod.PATCH,
        path_template="/v1/webhooks/{webhookId}",
        bindings=(path_param("webhookId"),),
    ),
    EndpointDescriptor(
        name="delete-webhook",
        description="This endpoint removes a Webhook identified by the `webhookId` parameter.",
        input_schema=_object(["webhookId"], webhookId=_WEBHOOK_ID),
        method=HttpMethod.DELETE,
        path_template="/v1/webhooks/{webhookId}",
        bindings=(path_param("webhookId"),),
    ),
    EndpointDescriptor(
        name="get-webhook-signing-keys",
        description=(
            "This endpoint returns the signing keys of a Webhook identified by the `webhookId`. "
            "Signing keys are used for ensuring the Webhook requests you receive are actually "
            "sent by ConfigCat."
        ),
        input_schema=_object(["webhookId"], webhookId=_WEBHOOK_ID),
        method=HttpMethod.GET,
        path_template="/v1/webhooks/{webhookId}/keys",
        bindings=(path_param("webhookId"),),
    ),
    # Permission Groups ------------------------------------------------------
    EndpointDescriptor(
        name="list-permission-groups",
        description=(
            "This endpoint returns the list of the Permission Groups that belongs to the "
            "given Product identified by the `productId` parameter."
        ),
        input_schema=_object(["productId"], productId=_PRODUCT_ID),
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}/permissions",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="create-permission-group",
        description=(
            "This endpoint creates a new Permission Group in a specified Product identified "
            "by the `productId` parameter, which can be obtained from the List Products endpoint."
        ),
        input_schema=_object(
            ["productId", "requestBody"],
            productId=_PRODUCT_ID,
            requestBody=_permission_group_body(update=False),
        ),
        method=HttpMethod.POST,
        path_template="/v1/products/{productId}/permissions",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="get-permission-group",
        description=(
            "This endpoint returns the metadata of a Permission Group identified by the "
            "`permissionGroupId`."
        ),
        input_schema=_object(["permissionGroupId"], permissionGroupId=_PERMISSION_GROUP_ID),
        method=HttpMethod.GET,
        path_template="/v1/permissions/{permissionGroupId}",
        bindings=(path_param("permissionGroupId"),),
    ),
    EndpointDescriptor(
        name="update-permission-group",
        description="This endpoint updates a Permission Group identified by the `permissionGroupId` parameter.",
        input_schema=_object(
            ["permissionGroupId", "requestBody"],
            permissionGroupId=_PERMISSION_GROUP_ID,
            requestBody=_permission_group_body(update=True),
        ),
        method=HttpMethod.PUT,
        path_template="/v1/permissions/{permissionGroupId}",
        bindings=(path_param("permissionGroupId"),),
    ),
    EndpointDescriptor(
        name="delete-permission-group",
        description=(
            "This endpoint removes a Permission Group identified by the `permissionGroupId` parameter."
        ),
        input_schema=_object(["permissionGroupId"], permissionGroupId=_PERMISSION_GROUP_ID),
        method=HttpMethod.DELETE,
        path_template="/v1/permissions/{permissionGroupId}",
        bindings=(path_param("permissionGroupId"),),
    ),
    # Integrations -----------------------------------------------------------
    EndpointDescriptor(
        name="list-integrations",
        description=(
            "This endpoint returns the list of the Integrations that belongs to the given "
            "Product identified by the `productId` parameter."
        ),
        input_schema=_object(["productId"], productId=_PRODUCT_ID),
        method=HttpMethod.GET,
        path_template="/v1/products/{productId}/integrations",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="create-integration",
        description=(
            "This endpoint creates a new Integration in a specified Product identified by the "
            "`productId` parameter." + _INTEGRATION_PARAMETERS_HELP
        ),
        input_schema=_object(
            ["productId", "requestBody"],
            productId=_PRODUCT_ID,
            requestBody=_integration_body(with_type=True),
        ),
        method=HttpMethod.POST,
        path_template="/v1/products/{productId}/integrations",
        bindings=(path_param("productId"),),
    ),
    EndpointDescriptor(
        name="get-integration",
        description="This endpoint returns the metadata of an Integration identified by the `integrationId`.",
        input_schema=_object(["integrationId"], integrationId=_INTEGRATION_ID),
        method=HttpMethod.GET,
        path_template="/v1/integrations/{integrationId}",
        bindings=(path_param("integrationId"),),
    ),
    EndpointDescriptor(
        name="update-integration",
        description=(
            "This endpoint updates an Integration identified by the `integrationId` parameter."
            + _INTEGRATION_PARAMETERS_HELP
        ),
        input_schema=_object(
            ["integrationId", "requestBody"],
            integrationId=_INTEGRATION_ID,
            requestBody=_integration_body(with_type=False),
        ),
        method=HttpMethod.PUT,
        path_template="/v1/integrations/{integrationId}",
        bindings=(path_param("integrationId"),),
    ),
    EndpointDescriptor(
        name="delete-integration",
        description="This endpoint removes an Integration identified by the `integrationId` parameter.",
        input_schema=_object(["integrationId"], integrationId=_INTEGRATION_ID),
        method=HttpMethod.DELETE,
        path_template="/v1/integrations/{integrationId}",
        bindings=(path_param("integrationId"),),
    ),
]
