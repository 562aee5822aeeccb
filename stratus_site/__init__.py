"""Static website hosting stack: S3, CloudFront, ACM and Route 53 on AWS CDK."""
