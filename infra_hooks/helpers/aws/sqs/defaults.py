consumer_defaults = {
    "timeout": 15,
    "batchSize": 10,
    "maximumBatchingWindow": 10,
}

main_queue_defaults = {
    "maxReceiveCount": 5,
    "receiveMessageWaitTimeSeconds": 20,
    "visibilityTimeout": 60,
}

# a delay path is a variant of the main one
delay_consumer_defaults = dict(consumer_defaults)
delay_queue_defaults = dict(main_queue_defaults)

dlq_consumer_defaults = {
    "timeout": 15,
    "batchSize": 10,
    "maximumBatchingWindow": 10,
}

dlq_queue_defaults = {
    "receiveMessageWaitTimeSeconds": 20,
    "visibilityTimeout": 60,
    # 10 days
    "messageRetentionPeriod": 864000,
}
