import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from .errors import PatientNotFound, StoreError

KEY = "patient_id"


def connect(settings):
    """Build the DynamoDB Table resource for the configured endpoint."""
    if settings.IS_OFFLINE:
        dynamodb = boto3.resource(
            "dynamodb",
            region_name=settings.OFFLINE_REGION,
            endpoint_url=settings.OFFLINE_ENDPOINT,
        )
    else:
        dynamodb = boto3.resource("dynamodb", region_name=settings.AWS_REGION)
    return dynamodb.Table(settings.PATIENTS_TABLE)


def _store_error(err):
    error = err.response.get("Error", {})
    meta = err.response.get("ResponseMetadata", {})
    return StoreError(
        error.get("Code") or "Exception",
        error.get("Message") or "Unknown error",
        meta.get("HTTPStatusCode") or 500,
    )


def _is_condition_failure(err):
    return err.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


class DynamoPatientStore:
    """One DynamoDB request per call, keyed on patient_id."""

    def __init__(self, table):
        self.table = table

    def scan(self, limit, start_after=None):
        params = {"Limit": limit}
        if start_after:
            params["ExclusiveStartKey"] = {KEY: start_after}
        try:
            resp = self.table.scan(**params)
        except ClientError as err:
            raise _store_error(err) from err
        last = resp.get("LastEvaluatedKey")
        return resp.get("Items", []), (last[KEY] if last else None)

    def get(self, patient_id):
        try:
            resp = self.table.get_item(Key={KEY: patient_id})
        except ClientError as err:
            raise _store_error(err) from err
        return resp.get("Item")

    def put(self, item):
        try:
            self.table.put_item(Item=item)
        except ClientError as err:
            raise _store_error(err) from err

    def update(self, patient_id, fields):
        names = {}
        values = {}
        assignments = []
        for attr, value in fields.items():
            names[f"#{attr}"] = attr
            values[f":{attr}"] = value
            assignments.append(f"#{attr} = :{attr}")
        try:
            self.table.update_item(
                Key={KEY: patient_id},
                UpdateExpression="SET " + ", ".join(assignments),
                ConditionExpression=Attr(KEY).exists(),
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
            )
        except ClientError as err:
            if _is_condition_failure(err):
                raise PatientNotFound(patient_id, "updated") from err
            raise _store_error(err) from err

    def delete(self, patient_id):
        try:
            self.table.delete_item(
                Key={KEY: patient_id},
                ConditionExpression=Attr(KEY).exists(),
            )
        except ClientError as err:
            if _is_condition_failure(err):
                raise PatientNotFound(patient_id, "deleted") from err
            raise _store_error(err) from err
