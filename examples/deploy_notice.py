""" Send a notification to an Aroma service announcing a deployment. The
    application token and the service location are supplied on the command
    line; no environment variables are consulted.

    python deploy_notice.py TOKEN VERSION [HOSTNAME PORT]
"""

import logging
import sys

import aroma


def main():

    logging.basicConfig(level=logging.DEBUG)

    token = sys.argv[1]
    version = sys.argv[2]

    builder = aroma.new_builder().with_application_token(token)

    if len(sys.argv) > 4:
        builder = builder.with_endpoint(sys.argv[3], int(sys.argv[4]))

    with builder.build() as client:
        client.begin() \
            .titled('Deploy') \
            .with_body('v{} deployed', version) \
            .with_priority(aroma.Priority.HIGH) \
            .send()

    # Leaving the with block waited for the message to be delivered, or
    # for the attempt to fail; either way the outcome is in the log.


if __name__ == '__main__':
    main()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
